from pydantic import Field, PostgresDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: PostgresDsn = Field(..., alias="DATABASE_URL")
    DEBUG: bool = Field(default=False, alias="DEBUG")

    # Server Configuration
    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=7082, alias="PORT")
    CORS_ORIGINS: list[str] = Field(default=["*"], alias="CORS_ORIGINS")

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = Field(default=10, alias="BCRYPT_ROUNDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
