from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./rentdash.db"
    ENV: str = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"  # standard|json

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Dashboard
    MONTH_LABEL_LOCALE: str = "pt-BR"  # pt-BR|en
    FINANCIAL_SERIES_MONTHS: int = 6
    PAYMENT_REMINDERS_LIMIT: int = 5

    # Sample data (python -m rentdash.seed)
    SAMPLE_DATA_SEED: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
