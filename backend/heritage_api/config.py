from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = Field(
        default="sqlite:///heritage.db",
        validation_alias=AliasChoices("HERITAGE_DATABASE_URL", "DATABASE_URL"),
    )
    host: str = "127.0.0.1"
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("HERITAGE_PORT", "PORT"),
    )
    bcrypt_rounds: int = 12
    cors_origins: str = "https://imgur.com"
    sites_seed_file: str | None = None
    log_level: str = "INFO"

    class Config:
        env_prefix = "HERITAGE_"

    @property
    def allow_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
