"""Clipboard utilities for the CLI frontend.

Uses pyperclip for cross-platform clipboard access.
"""

from __future__ import annotations

import pyperclip


def copy_to_clipboard(text: str) -> None:
    """Copy an envelope (or any text) to the system clipboard.

    Raises:
        pyperclip.PyperclipException: If no clipboard mechanism is available.
    """
    pyperclip.copy(text)


def paste_from_clipboard() -> str:
    """Return the current clipboard text ("" when empty)."""
    return pyperclip.paste() or ""
