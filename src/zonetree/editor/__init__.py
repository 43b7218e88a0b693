"""Editor integration: keyboard shortcuts and host actions.

Architecture Note:
    editor/ is the only layer that talks to the host. It reads the current
    document through a getter and sends replacements through one dispatch
    callable; nothing below it dispatches.
"""

from zonetree.editor.actions import ActionType, HostAction
from zonetree.editor.shortcuts import KeyEvent, Shortcut, ShortcutController, resolve_shortcut

__all__ = [
    "ActionType",
    "HostAction",
    "KeyEvent",
    "Shortcut",
    "ShortcutController",
    "resolve_shortcut",
]
