"""Read and write plain text on the system clipboard.

Failures are silent: reading gives an empty string and writing does nothing.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

try:
    import tkinter
except ImportError:  # Python built without Tk support
    tkinter = None

__all__ = ["read_clipboard_text", "write_clipboard_text"]


@contextmanager
def _hidden_root() -> Iterator[object | None]:
    """Yield a hidden Tk root window, or None when Tk is unavailable."""
    if tkinter is None:
        yield None
        return
    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        yield None
        return
    try:
        root.withdraw()
        yield root
    finally:
        try:
            root.destroy()
        except tkinter.TclError:
            pass


def read_clipboard_text() -> str:
    """Return the clipboard's text, or an empty string if none can be read."""
    with _hidden_root() as root:
        if root is None:
            return ""
        try:
            text = root.clipboard_get()
        except tkinter.TclError:
            return ""
        return text if isinstance(text, str) else ""


def write_clipboard_text(text: str) -> None:
    """Replace the clipboard's contents with ``text``; do nothing on failure."""
    with _hidden_root() as root:
        if root is None:
            return
        try:
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        except tkinter.TclError:
            return