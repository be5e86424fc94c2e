"""Slug generation pipeline."""

from __future__ import annotations

import dataclasses
import re
from typing import Any, FrozenSet, List, Optional, Sequence

from slug_cli.core.models import Case, SlugOptions
from slug_cli.core.random_source import DEFAULT_RANDOM_SOURCE, RandomSource
from slug_cli.core.transliterate import DEFAULT_TRANSLITERATOR, Transliterator

_TOKEN_RE = re.compile(r"[A-Za-z0-9]+")


def tokenize(text: str) -> List[str]:
    """Split ASCII text into maximal alphanumeric runs."""
    return _TOKEN_RE.findall(text)


def join_tokens(tokens: Sequence[str], separator: str, max_length: Optional[int] = None) -> str:
    """Join tokens, keeping only whole tokens that fit within ``max_length``."""
    if max_length is None:
        return separator.join(tokens)

    limit = max(max_length, 0)
    kept: List[str] = []
    length = 0
    for token in tokens:
        extra = len(token) + (len(separator) if kept else 0)
        if length + extra > limit:
            break
        kept.append(token)
        length += extra
    return separator.join(kept)


def apply_case(value: str, case: Case) -> str:
    if case is Case.LOWER:
        return value.lower()
    if case is Case.UPPER:
        return value.upper()
    return value


class Slugifier:
    """Slug transformer with injectable transliteration and randomness.

    Instances hold no per-call state and may be shared between threads as
    long as the random source is thread-safe (both bundled sources are).
    """

    def __init__(
        self,
        transliterator: Optional[Transliterator] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.transliterator = transliterator or DEFAULT_TRANSLITERATOR
        self.random_source = random_source or DEFAULT_RANDOM_SOURCE

    def _stop_words(self, options: SlugOptions) -> FrozenSet[str]:
        return frozenset(
            self.transliterator(word).strip().lower() for word in options.stop_words
        )

    def tokens(self, text: str, options: SlugOptions) -> List[str]:
        """Transliterate and tokenize ``text``, dropping stop words."""
        ascii_text = self.transliterator(text or "")
        stop_words = self._stop_words(options)
        return [
            apply_case(token, options.case)
            for token in tokenize(ascii_text)
            if token.lower() not in stop_words
        ]

    def __call__(self, text: str, options: Optional[SlugOptions] = None, **overrides: Any) -> str:
        opts = options or SlugOptions()
        if overrides:
            opts = dataclasses.replace(opts, **overrides)

        body = join_tokens(self.tokens(text, opts), opts.separator, opts.max_length)

        if opts.randomness and opts.randomness_length > 0:
            suffix = apply_case(self.random_source.token(opts.randomness_length), opts.case)
            return f"{body}{opts.separator}{suffix}" if body else suffix
        return body


_DEFAULT_SLUGIFIER = Slugifier()


def slugify(text: str, options: Optional[SlugOptions] = None, **overrides: Any) -> str:
    """Generate a slug from free-form text.

    >>> slugify("hello world")
    'hello-world'
    >>> slugify("the quick brown fox", stop_words={"the", "fox"}, separator=".")
    'quick.brown'
    >>> slugify("影師嗎")
    'ying-shi-ma'
    """
    return _DEFAULT_SLUGIFIER(text, options, **overrides)
