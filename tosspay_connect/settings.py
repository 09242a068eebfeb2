from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "TossPayConnect"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8080

    # Default processor selection
    DEFAULT_PROCESSOR: str = "tosspayments"

    # Processor: TossPayments
    TOSSPAYMENTS_BASE_URL: str = "https://api.tosspayments.com"
    TOSSPAYMENTS_SECRET_KEY: Optional[str] = None
    TOSSPAYMENTS_API_VERSION: Optional[str] = None
    TOSSPAYMENTS_DEBUG: bool = False
    TOSSPAYMENTS_TIMEOUT_SEC: int = 15

settings = Settings()
