from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field("Fee Management Backend", alias="APP_NAME")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    seed_sample_data: bool = Field(True, alias="SEED_SAMPLE_DATA")
    currency_symbol: str = Field("₹", alias="CURRENCY_SYMBOL")
    receipt_prefix: str = Field("RCP", alias="RECEIPT_PREFIX")
    passout_after_years: int = Field(4, alias="PASSOUT_AFTER_YEARS")

    jwt_secret_key: str = Field("change-me-in-production", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Single administrator account; the dashboard has no user management.
    admin_email: str = Field("admin@school.com", alias="ADMIN_EMAIL")
    admin_password: str = Field("admin123", alias="ADMIN_PASSWORD")
    # bcrypt hash; when set it is checked instead of ADMIN_PASSWORD.
    admin_password_hash: Optional[str] = Field(None, alias="ADMIN_PASSWORD_HASH")
    admin_name: str = Field("School Administrator", alias="ADMIN_NAME")
    institution_id: str = Field("school-001", alias="INSTITUTION_ID")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


settings = Settings()
