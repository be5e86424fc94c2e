from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from slug_cli.core.random_source import SeededRandomSource
from slug_cli.core.slugify import Slugifier


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("SLUG_CONFIG_FILE", str(path))
    monkeypatch.delenv("SLUG_SEPARATOR", raising=False)
    monkeypatch.delenv("SLUG_OUTPUT_FILE", raising=False)
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def seeded_slugifier() -> Slugifier:
    return Slugifier(random_source=SeededRandomSource(1234))


@pytest.fixture()
def sample_titles() -> list:
    return [
        "Hello World",
        "The Quick Brown Fox",
        "影師嗎",
        "Æúű--cool?",
    ]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write
