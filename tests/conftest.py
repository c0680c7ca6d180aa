import json
import sys
from pathlib import Path

import pytest

import confmap


EXAMPLE_CONFIG = {
    "testGetString": "YesMan",
    "testGetInt64": 43,
    "testGetStringArray": ["+44 1234567", "+44 2345678"],
}


def write_config(directory: Path, data, name: str = "config.json") -> Path:
    """Helper to write a config file; ``data`` may be a dict or raw text."""
    path = directory / name
    text = data if isinstance(data, str) else json.dumps(data)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def example_file(tmp_path):
    return write_config(tmp_path, EXAMPLE_CONFIG)


@pytest.fixture(autouse=True)
def clean_default_store(tmp_path, monkeypatch):
    """Keep the shared store and the fallback directory isolated per test."""
    program_dir = tmp_path / "program"
    program_dir.mkdir()
    monkeypatch.setattr(sys, "argv", [str(program_dir / "app.py")])
    confmap.reset()
    yield
    confmap.reset()
