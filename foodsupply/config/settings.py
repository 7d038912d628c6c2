from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "foodSupply"

    # Auth
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    expires_in: str = "1h"  # seconds, or number with s/m/h/d/w suffix
    bcrypt_rounds: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # App
    app_name: str = "foodsupply-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "*"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
