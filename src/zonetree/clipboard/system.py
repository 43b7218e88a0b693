"""OS clipboard bridge.

The OS clipboard is best-effort: it may be missing (headless sessions) or
denied. Implementations signal that with ClipboardUnavailableError and the
transport treats it as "no OS clipboard".
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pyperclip


class ClipboardUnavailableError(OSError):
    """Raised when the OS clipboard cannot be read or written."""

    pass


@runtime_checkable
class SystemClipboard(Protocol):
    """Plain-text access to the OS clipboard."""

    def write_text(self, text: str) -> None:
        """Replace the clipboard contents with text."""
        ...

    def read_text(self) -> str:
        """Return the current clipboard text (blocking)."""
        ...


class PyperclipClipboard:
    """SystemClipboard backed by pyperclip."""

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(str(e)) from e

    def read_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(str(e)) from e
