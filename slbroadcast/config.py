"""Configuration management for the slbroadcast application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # External tools
    OCM_BIN: str = os.getenv("SLBROADCAST_OCM_BIN", "ocm")
    OSDCTL_BIN: str = os.getenv("SLBROADCAST_OSDCTL_BIN", "osdctl")

    # CLUSTER_UUID value used when rendering the preview
    PLACEHOLDER_UUID: str = os.getenv(
        "SLBROADCAST_PLACEHOLDER_UUID",
        "00000000-0000-0000-0000-000000000000"
    )

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        required = {
            "SLBROADCAST_OCM_BIN": cls.OCM_BIN,
            "SLBROADCAST_OSDCTL_BIN": cls.OSDCTL_BIN,
            "SLBROADCAST_PLACEHOLDER_UUID": cls.PLACEHOLDER_UUID,
        }
        missing = [k for k, v in required.items() if not v.strip()]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

# Don't validate on import so tests can override attributes first
