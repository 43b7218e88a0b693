"""Configuration module using Pydantic Settings.

Usage:
    from zonetree.config import EditorSettings

    settings = EditorSettings(use_system_clipboard=False)
"""

from zonetree.config.settings import EditorSettings

__all__ = [
    "EditorSettings",
]
