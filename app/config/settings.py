from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Limpias Solar Store"
    ENVIRONMENT: str = "development" # "production" turns on secure cookies
    LOG_LEVEL: str = "INFO"
    DATABASE_URL: str = "sqlite:///./limpias.db" # Default to SQLite for simplicity, can be changed
    SECRET_KEY: str = "supersecretkey" # Change in production
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "limpias.sid"
    SESSION_MAX_AGE_DAYS: int = 7
    COOKIE_DOMAIN: Optional[str] = None
    BCRYPT_ROUNDS: int = 10
    UPLOAD_DIR: str = "public/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024
    SHIPPING_FLAT_RATE: float = 15.00
    TAX_RATE: float = 0.16
    SEED_DATABASE: bool = True
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = "admin@limpiastech.com"
    ADMIN_PASSWORD: str = "admin123" # Change in production
    CORS_ORIGINS: List[str] = ["*"]
    ROOT_PATH: Optional[str] = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def session_max_age_seconds(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 60 * 60

settings = Settings()
