"""Application configuration using pydantic settings with structured sections."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./jobpay.db", alias="url")
    echo: bool = False
    busy_timeout: float = Field(default=5.0, gt=0)
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class PaymentSettings(BaseModel):
    # Share of a client's outstanding unpaid job total that may be deposited at once.
    deposit_limit_ratio: Decimal = Field(default=Decimal("0.25"), gt=0)
    best_clients_default_limit: int = Field(default=2, ge=1)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Job Payments Server"
    api_prefix: str = ""

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    payments: PaymentSettings = PaymentSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def deposit_limit_ratio(self) -> Decimal:
        return self.payments.deposit_limit_ratio

    @property
    def log_level(self) -> str:
        return self.logging.level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
