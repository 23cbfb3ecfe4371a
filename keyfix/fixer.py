"""Detect the keyboard layout text was typed in and retype it in the other one."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

__all__ = [
    "ARABIC_TO_ENGLISH",
    "ENGLISH_TO_ARABIC",
    "Language",
    "detect_language",
    "fix_char",
    "fix_language",
]


class Language(Enum):
    """The layout a piece of text was typed with."""

    ARABIC = "arabic"
    ENGLISH = "english"


# Arabic layout character -> key on the English layout at the same position.
ARABIC_TO_ENGLISH: Mapping[str, str] = MappingProxyType(
    {
        "ض": "q",
        "ص": "w",
        "ث": "e",
        "ق": "r",
        "ف": "t",
        "غ": "y",
        "ع": "u",
        "ه": "i",
        "خ": "o",
        "ح": "p",
        "ج": "[",
        "د": "]",
        "ش": "a",
        "س": "s",
        "ي": "d",
        "ب": "f",
        "ل": "g",
        "ا": "h",
        "ت": "j",
        "ن": "k",
        "م": "l",
        "ك": ";",
        "ط": "'",
        "ئ": "z",
        "ء": "x",
        "ؤ": "c",
        "ر": "v",
        "ى": "n",
        "ة": "m",
        "و": ",",
        "ز": ".",
        "ظ": "/",
        "ذ": "`",
        "\u064e": "Q",
        "\u064b": "W",
        "\u064f": "E",
        "\u064c": "R",
        "إ": "Y",
        "\u2018": "U",
        "÷": "I",
        "×": "O",
        "؛": "P",
        "<": "{",
        ">": "}",
        "\u0650": "A",
        "\u064d": "S",
        "]": "D",
        "[": "F",
        "أ": "H",
        "ـ": "J",
        "،": "K",
        "/": "L",
        "~": "Z",
        "\u0652": "X",
        "}": "C",
        "{": "V",
        "آ": "N",
        "\u2019": "M",
        ",": "<",
        ".": ">",
        "؟": "?",
    }
)

# English layout key -> character the Arabic layout produces on that key.
ENGLISH_TO_ARABIC: Mapping[str, str] = MappingProxyType(
    {
        "q": "ض",
        "w": "ص",
        "e": "ث",
        "r": "ق",
        "t": "ف",
        "y": "غ",
        "u": "ع",
        "i": "ه",
        "o": "خ",
        "p": "ح",
        "[": "ج",
        "]": "د",
        "a": "ش",
        "s": "س",
        "d": "ي",
        "f": "ب",
        "g": "ل",
        "h": "ا",
        "j": "ت",
        "k": "ن",
        "l": "م",
        ";": "ك",
        "'": "ط",
        "z": "ئ",
        "x": "ء",
        "c": "ؤ",
        "v": "ر",
        "b": "ل",
        "n": "ى",
        "m": "ة",
        ",": "و",
        ".": "ز",
        "/": "ظ",
        "`": "ذ",
        "Q": "\u064e",
        "W": "\u064b",
        "E": "\u064f",
        "R": "\u064c",
        "T": "ف",
        "Y": "إ",
        "U": "\u2018",
        "I": "÷",
        "O": "×",
        "P": "؛",
        "{": "<",
        "}": ">",
        "A": "\u0650",
        "S": "\u064d",
        "D": "]",
        "F": "[",
        "G": "ل",
        "H": "أ",
        "J": "ـ",
        "K": "،",
        "L": "/",
        "Z": "~",
        "X": "\u0652",
        "C": "}",
        "V": "{",
        "B": "ل",
        "N": "آ",
        "M": "\u2019",
        "<": ",",
        ">": ".",
        "?": "؟",
    }
)

_TABLES: Mapping[Language, Mapping[str, str]] = MappingProxyType(
    {
        Language.ARABIC: ARABIC_TO_ENGLISH,
        Language.ENGLISH: ENGLISH_TO_ARABIC,
    }
)


def detect_language(text: str) -> Language:
    """Return ARABIC if any character lies in the Arabic block, else ENGLISH."""
    if any("\u0600" <= char <= "\u06ff" for char in text):
        return Language.ARABIC
    return Language.ENGLISH


def fix_char(char: str, char_map: Mapping[str, str]) -> str:
    """Map one character through ``char_map``, leaving unknown ones unchanged."""
    return char_map.get(char, char)


def fix_language(text: str, lang: Language) -> str:
    """Retype ``text``, typed in layout ``lang``, on the other layout."""
    try:
        table = _TABLES[lang]
    except KeyError:
        raise ValueError(f"unsupported language: {lang!r}") from None
    return "".join(fix_char(char, table) for char in text)