"""Lightweight data models used across the transformer and commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from slug_cli.core.constants import DEFAULT_RANDOMNESS_LENGTH, DEFAULT_SEPARATOR


class Case(str, enum.Enum):
    """Casing applied to the finished slug."""

    LOWER = "lower"
    UPPER = "upper"
    SAME = "same"


StopWords = Union[str, Iterable[str], None]


def split_stop_words(value: StopWords) -> FrozenSet[str]:
    """Normalize a comma-separated string or iterable of stop words."""
    if value is None:
        return frozenset()
    items = value.split(",") if isinstance(value, str) else value
    return frozenset(word.strip().lower() for word in items if word and word.strip())


@dataclass(frozen=True)
class SlugOptions:
    """Options for a single slugify call.

    ``randomness_length`` only matters when ``randomness`` is set. A
    ``max_length`` of ``None`` leaves the slug body unbounded.
    """

    separator: str = DEFAULT_SEPARATOR
    stop_words: FrozenSet[str] = field(default_factory=frozenset)
    max_length: Optional[int] = None
    randomness: bool = False
    randomness_length: int = DEFAULT_RANDOMNESS_LENGTH
    case: Case = Case.LOWER

    def __post_init__(self) -> None:
        object.__setattr__(self, "stop_words", split_stop_words(self.stop_words))
        object.__setattr__(self, "case", Case(self.case))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly view of the options."""
        return {
            "separator": self.separator,
            "stop_words": sorted(self.stop_words),
            "max_length": self.max_length,
            "randomness": self.randomness,
            "randomness_length": self.randomness_length,
            "case": self.case.value,
        }
