# keyfix

If you type with the keyboard set to the wrong layout, the text comes out as
nonsense. For example, you meant to type `hello` while the Arabic layout was
active, so you got `اثممخ`. keyfix maps each character back to the key that
produced it and gives the character that key makes on the other layout. It
works in both directions, from Arabic to English and from English to Arabic.

## Installation

```
pip install .
```

keyfix has no third-party dependencies.

## Command line

```
keyfix
```

The command reads the text on the clipboard and works out which layout it was
typed in. It then writes the corrected text back to the clipboard. If the text
contains any character from the Arabic block (U+0600 to U+06FF), keyfix treats
it as Arabic and converts it to English. Otherwise it converts it to Arabic.
The command takes no options other than `--help`, and its exit status is 0.

The clipboard is accessed through Tk (`tkinter`) from the standard library.
Tk may be missing from your Python, or it may be unable to start, for example
when there is no display. The clipboard may also hold no text. In any of these
cases reading gives an empty string. If writing fails, nothing is written, and
no error is reported.

## Library

```python
from keyfix.fixer import Language, detect_language, fix_language

text = "اثممخ"
lang = detect_language(text)          # Language.ARABIC
print(fix_language(text, lang))       # hello

print(fix_language(";dt phg;", Language.ENGLISH))  # كيف حالك
```

- `Language` is an enum with the members `ARABIC` and `ENGLISH`.
- `detect_language(text)` returns `Language.ARABIC` if any character of `text`
  falls in U+0600 to U+06FF. Otherwise it returns `Language.ENGLISH`, and that
  includes empty text.
- `fix_language(text, lang)` retypes `text`, which was typed in layout `lang`,
  on the other layout. It raises `ValueError` if `lang` is not a `Language`.
- `fix_char(char, char_map)` maps one character through any mapping you pass
  in. A character the mapping lacks comes back unchanged.
- `ARABIC_TO_ENGLISH` and `ENGLISH_TO_ARABIC` are the read-only tables used by
  `fix_language`.

Characters that have no entry in the table pass through unchanged. This
includes spaces and digits. The tables are not exact inverses of each other.
For example, English `b`, `G`, `B` and `g` all map to `ل`, but `ل` maps back
only to `g`.

The clipboard functions are also available on their own:
`keyfix.clipboard.read_clipboard_text()` and
`keyfix.clipboard.write_clipboard_text(text)`.

## Tests

```
pip install .[test]
pytest
```