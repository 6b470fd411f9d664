# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "sarif"
MINIMAL_DOC = FIXTURES_DIR / "minimal.sarif.json"
FULL_DOC = FIXTURES_DIR / "full.sarif.json"


@pytest.fixture
def minimal_text() -> str:
    return MINIMAL_DOC.read_text(encoding="utf-8")


@pytest.fixture
def full_text() -> str:
    return FULL_DOC.read_text(encoding="utf-8")


@pytest.fixture
def full_data(full_text: str) -> dict[str, Any]:
    return json.loads(full_text)


@pytest.fixture(autouse=True)
def _clear_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from SARIFKIT_* variables set in the outer environment."""
    for name in (
        "SARIFKIT_JSON_INDENT",
        "SARIFKIT_EXCLUDE_UNSET",
        "SARIFKIT_SCHEMA_URI",
        "SARIFKIT_LOG_LEVEL",
        "SARIFKIT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
