"""Random suffix sources."""

from __future__ import annotations

import random
import secrets
import threading
from typing import Optional, Protocol, Sequence

from slug_cli.core.constants import RANDOM_ALPHABET


class RandomSource(Protocol):
    """Produces random identifiers of a requested length."""

    def token(self, length: int) -> str:
        ...


class SecretsRandomSource:
    """OS-entropy source, safe to share between threads."""

    def __init__(self, alphabet: Sequence[str] = RANDOM_ALPHABET) -> None:
        self.alphabet = tuple(alphabet)

    def token(self, length: int) -> str:
        if length <= 0:
            return ""
        return "".join(secrets.choice(self.alphabet) for _ in range(length))


class SeededRandomSource:
    """Reproducible source for tests and ``--seed``."""

    def __init__(self, seed: Optional[int] = None, alphabet: Sequence[str] = RANDOM_ALPHABET) -> None:
        self.alphabet = tuple(alphabet)
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def token(self, length: int) -> str:
        if length <= 0:
            return ""
        with self._lock:
            return "".join(self._rng.choice(self.alphabet) for _ in range(length))


DEFAULT_RANDOM_SOURCE = SecretsRandomSource()
