"""
Configuration module for dyn-form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class DynFormConfig:
    """Configuration settings for dyn-form."""

    # HTTP server settings
    server_host: str = "0.0.0.0"
    server_port: int = 4000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Submission store
    db_path: str = "db.json"

    # Listing settings
    default_page_size: int = 10
    max_page_size: int = 100

    # Client settings
    server_url: str = "http://localhost:4000"

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DynFormConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        cors_env = os.getenv("DYN_FORM_CORS_ORIGINS")
        cors_origins = (
            [origin.strip() for origin in cors_env.split(",") if origin.strip()]
            if cors_env
            else _defaults.cors_origins
        )

        return cls(
            server_host=os.getenv("DYN_FORM_HOST", _defaults.server_host),
            server_port=int(os.getenv("PORT", str(_defaults.server_port))),
            cors_origins=cors_origins,
            db_path=os.getenv("DYN_FORM_DB_PATH", _defaults.db_path),
            default_page_size=int(os.getenv("DYN_FORM_PAGE_SIZE", str(_defaults.default_page_size))),
            max_page_size=int(os.getenv("DYN_FORM_MAX_PAGE_SIZE", str(_defaults.max_page_size))),
            server_url=os.getenv("DYN_FORM_SERVER_URL", _defaults.server_url),
            log_level=os.getenv("DYN_FORM_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = DynFormConfig.from_env()


def get_config() -> DynFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> DynFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
