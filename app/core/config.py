from decimal import Decimal
from typing import Literal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./splito.db"
    DB_CONNECT_RETRIES: int = 5
    SETTLEMENT_TOLERANCE: Decimal = Decimal("0.01")
    SUBGROUP_PAYER_POLICY: Literal["ignore", "members"] = "ignore"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
