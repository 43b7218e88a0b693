"""Configuration settings using Pydantic Settings.

Provides typed editor configuration with environment variable support.

Usage:
    from zonetree.config import EditorSettings

    # Load from environment variables (ZONETREE_*)
    settings = EditorSettings()

    # Or override with explicit values
    settings = EditorSettings(delete_confirmation_threshold=10)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the shortcut controller and clipboard transport.

    Attributes:
        delete_confirmation_threshold: Deleting more than this many selected
            components asks the host to confirm first.
        use_system_clipboard: Mirror copies to the OS clipboard and fall back
            to it on paste.
        id_strategy: "uuid" for random ids, "sequential" for reproducible ones.
        id_prefix: Prefix for sequential ids.
        log_level: Level passed to setup_logging().

    Environment Variables:
        ZONETREE_DELETE_CONFIRMATION_THRESHOLD
        ZONETREE_USE_SYSTEM_CLIPBOARD
        ZONETREE_ID_STRATEGY
        ZONETREE_ID_PREFIX
        ZONETREE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ZONETREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    delete_confirmation_threshold: int = Field(default=5, ge=0)
    use_system_clipboard: bool = True
    id_strategy: Literal["uuid", "sequential"] = "uuid"
    id_prefix: str = Field(default="node", pattern=r"^[^:]+$")
    log_level: str = "WARNING"
