from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "development"
    log_level: str = "INFO"

    # CORS - the dashboard origin plus any extra comma-separated origins
    frontend_url: str = "http://localhost:3000"
    cors_origins: str = ""

    # JWT - tokens are optional; absent tokens resolve to the guest user
    jwt_secret_key: str = "fallback-secret"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60
    guest_user_id: str = "demo"

    # Paper account
    default_balance: float = 100000.0
    currency: str = "INR"

    # Rate limiting (per client IP)
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 900  # 15 minutes

    # Include exception text in 500 responses (demo only)
    expose_error_details: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def get_cors_origins_list(self) -> List[str]:
        """Frontend origin first, then any extra origins from CORS_ORIGINS"""
        origins = [self.frontend_url]
        for origin in self.cors_origins.split(","):
            origin = origin.strip()
            if origin and origin not in origins:
                origins.append(origin)
        return origins

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
