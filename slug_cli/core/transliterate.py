"""Unicode to ASCII transliteration strategies."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol

from unidecode import unidecode


class Transliterator(Protocol):
    """Maps arbitrary unicode text to ASCII."""

    def __call__(self, text: str) -> str:
        ...


class UnidecodeTransliterator:
    """Table-driven transliteration backed by Unidecode.

    Latin letters lose their diacritics, ligatures expand (``Æ`` -> ``AE``),
    Han characters become Pinyin syllables and Cyrillic is romanized. Code
    points missing from the table are dropped.

    ``overrides`` maps single characters to replacement strings and is
    consulted before the table, for scripts or symbols where the default
    romanization is not wanted.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self.overrides = dict(overrides or {})

    def __call__(self, text: str) -> str:
        if not text:
            return ""
        if self.overrides:
            text = "".join(self.overrides.get(char, char) for char in text)
        if text.isascii():
            return text
        return unidecode(text, errors="ignore")


DEFAULT_TRANSLITERATOR = UnidecodeTransliterator()
