"""
Runtime configuration for the catalog service.

Values come from the process environment (a local ``.env`` file is loaded
first when present).
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
load_dotenv()


@dataclass
class Settings:
    """Settings for one running catalog service."""

    host: str = "0.0.0.0"
    port: int = 3000
    api_key: Optional[str] = None       # None rejects every /api request
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from HOST, PORT, API_KEY and LOG_LEVEL."""
        return cls(
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            api_key=os.getenv("API_KEY") or None,
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
