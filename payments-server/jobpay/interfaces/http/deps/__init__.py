"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .payments import get_payment_service
from .profile import get_current_profile

__all__ = [
    "get_db_session",
    "get_current_profile",
    "get_payment_service",
]
