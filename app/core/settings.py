"""Application settings with environment validation."""

import os
from typing import List, Optional


class Settings:
    """Application settings with environment validation."""

    def __init__(self) -> None:
        # Application
        self.app_url = os.getenv("APP_URL", "http://localhost:3000")
        self.environment = os.getenv("ENV", "development")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        # Security
        self.cors_origins = self._parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))

        # Key-value store
        self.redis_url: Optional[str] = os.getenv("REDIS_URL")
        self.redis_key_prefix = os.getenv("REDIS_KEY_PREFIX", "quiz:")
        self.redis_socket_timeout = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))

        # Quiz / leaderboard
        # Fallback user when the client has no social-network context
        self.default_user_fid = int(os.getenv("DEFAULT_USER_FID", "203090"))
        self.leaderboard_default_limit = int(os.getenv("LEADERBOARD_DEFAULT_LIMIT", "50"))
        self.user_types_scan_limit = int(os.getenv("USER_TYPES_SCAN_LIMIT", "100"))

    def _parse_cors_origins(self, v: str) -> List[str]:
        if v == "*":
            return ["*"]
        return [origin.strip() for origin in v.split(",")]

    def _parse_bool(self, v: str) -> bool:
        return v.lower() in ("true", "1", "yes", "on")

    @property
    def docs_enabled(self) -> bool:
        return self.is_development or self._parse_bool(os.getenv("SHOW_DOCS", ""))

    @property
    def is_production(self) -> bool:  # convenience flag
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:  # convenience flag
        return self.environment.lower() == "development"


settings = Settings()
