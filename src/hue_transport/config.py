"""Configuration management for the Hue transport."""

import ipaddress
import logging
import os
import re
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*(?::\d{1,5})?$"
)


class HueConfig(BaseModel):
    """Configuration for Hue bridge connection."""

    bridge_host: str = Field(
        default="127.0.0.1", description="Host name or IP address of the Hue bridge"
    )
    username: Optional[str] = Field(
        default=None, description="Hue bridge username (whitelisted API key)"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    timeout_connect: float = Field(
        default=5.0, ge=1.0, le=30.0, description="Connection timeout in seconds"
    )
    timeout_read: float = Field(
        default=10.0, ge=1.0, le=60.0, description="Read timeout in seconds"
    )

    @field_validator("bridge_host")
    @classmethod
    def validate_host(cls, v):
        """Validate bridge host format."""
        v = v.strip()
        try:
            ipaddress.ip_address(v)
            return v
        except ValueError:
            pass
        if not _HOSTNAME_RE.match(v):
            raise ValueError(f"Invalid bridge host: {v!r}")
        return v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if v is not None and len(v) < 10:
            raise ValueError("Username must be at least 10 characters long")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @classmethod
    def from_env(cls) -> "HueConfig":
        """Create configuration from environment variables."""
        return cls(
            bridge_host=os.getenv(
                "HUE_BRIDGE_HOST", os.getenv("HUE_BRIDGE_IP", "127.0.0.1")
            ),
            username=os.getenv("HUE_USERNAME") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            timeout_connect=float(os.getenv("HUE_TIMEOUT_CONNECT", "5.0")),
            timeout_read=float(os.getenv("HUE_TIMEOUT_READ", "10.0")),
        )

    def api_path(self, path: str) -> str:
        """Prefix a resource path with the username, if one is configured."""
        path = path.lstrip("/")
        if not self.username:
            return path
        return f"{self.username}/{path}" if path else self.username


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging the way the library's entry points expect."""
    logging.basicConfig(
        level=getattr(logging, (level or config.log_level).upper()),
        format=LOG_FORMAT,
    )


# Global configuration instance
config = HueConfig.from_env()
