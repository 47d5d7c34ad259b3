"""Configuration settings for a plughost host.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via PLUGHOST_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class PlughostConfig(BaseSettings):
    """Global configuration for a plugin-driven host."""

    # Plugins requested by the host, in boot/update order
    plugins: list[str] = Field(default_factory=list)

    # Directories scanned for self-registering plugin modules
    plugin_dirs: list[str] = Field(default=["plugins"])

    # Catch and log plugin exceptions instead of propagating them
    isolate_plugin_errors: bool = False

    # Frame loop
    max_frames: int = 600
    frame_delay: float = 0.0  # seconds between frames

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "PLUGHOST_"}
