"""Parsing helpers for CLI input."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, FrozenSet, List, Optional, Sequence

import yaml

from slug_cli.core.models import split_stop_words


def parse_stop_words(values: Optional[Sequence[str]]) -> FrozenSet[str]:
    """Merge repeated ``--stop-words`` values, each possibly comma-separated."""
    words: set = set()
    for value in values or []:
        words |= split_stop_words(value)
    return frozenset(words)


def _coerce_texts(raw_data: Any) -> List[str]:
    if raw_data is None:
        return []
    if isinstance(raw_data, str):
        return [raw_data]
    if isinstance(raw_data, dict):
        # Accept {"texts": [...]} or a mapping of id -> text.
        if isinstance(raw_data.get("texts"), list):
            raw_data = raw_data["texts"]
        else:
            raw_data = list(raw_data.values())
    if isinstance(raw_data, list):
        return [str(item) for item in raw_data if item is not None and not isinstance(item, (dict, list))]
    return [str(raw_data)]


def _split_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_text_input(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[str]:
    """Load texts to slugify from a file or stdin.

    ``.json`` and ``.yaml``/``.yml`` files are parsed as structured data; any
    other file, and stdin that does not start with ``[`` or ``{``, is read as
    one text per non-blank line.
    """
    if file_path:
        text = file_path.read_text(encoding="utf-8")
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            return _coerce_texts(json.loads(text))
        if suffix in {".yaml", ".yml"}:
            return _coerce_texts(yaml.safe_load(text))
        return _split_lines(text)

    if read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        if text[0] in "[{":
            try:
                return _coerce_texts(json.loads(text))
            except json.JSONDecodeError:
                pass
            try:
                return _coerce_texts(yaml.safe_load(text))
            except yaml.YAMLError:
                # Titles such as "[WIP] Release notes" are plain lines.
                return _split_lines(text)
        return _split_lines(text)

    return []
