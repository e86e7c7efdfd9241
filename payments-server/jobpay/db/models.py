"""SQLAlchemy ORM models."""
from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobpay.infrastructure.database.base import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    profession = Column(String(100), nullable=False)
    balance_cents = Column(Integer, nullable=False, default=0)
    role = Column(Enum("client", "contractor", name="profile_role"), nullable=False)
    # optimistic lock, bumped by every balance write
    version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client_contracts = relationship("Contract", foreign_keys="Contract.client_id", back_populates="client")
    contractor_contracts = relationship(
        "Contract", foreign_keys="Contract.contractor_id", back_populates="contractor"
    )


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    terms = Column(Text, nullable=False)
    status = Column(
        Enum("new", "in_progress", "terminated", name="contract_status"),
        nullable=False,
        default="new",
    )
    client_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client = relationship("Profile", foreign_keys=[client_id], back_populates="client_contracts")
    contractor = relationship("Profile", foreign_keys=[contractor_id], back_populates="contractor_contracts")
    jobs = relationship("Job", back_populates="contract", cascade="all, delete-orphan")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)
    price_cents = Column(Integer, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(DateTime(timezone=True))
    contract_id = Column(Integer, ForeignKey("contracts.id"), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    contract = relationship("Contract", back_populates="jobs")
