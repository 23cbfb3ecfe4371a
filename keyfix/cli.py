"""Command that retypes the clipboard's text on the other keyboard layout."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from keyfix.clipboard import read_clipboard_text, write_clipboard_text
from keyfix.fixer import detect_language, fix_language

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Fix the clipboard's text in place and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="keyfix",
        description=(
            "Retype the clipboard's text as if it had been typed on the "
            "other keyboard layout (Arabic <-> English)."
        ),
    )
    parser.parse_args(argv)

    text = read_clipboard_text()
    lang = detect_language(text)
    write_clipboard_text(fix_language(text, lang))
    return 0