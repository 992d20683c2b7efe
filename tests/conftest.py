"""Pytest configuration for shared fixtures and path setup."""

from __future__ import annotations

import base64
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for candidate in (ROOT, SRC):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from radix64.alphabet import ORDERED_ALPHABET, STANDARD_ALPHABET, Dialect  # noqa: E402

_ORDERED_TO_STANDARD = bytes.maketrans(ORDERED_ALPHABET, STANDARD_ALPHABET)

_ENV_VARS = (
    "BASE64_BREAK_LINES",
    "BASE64_URL_SAFE",
    "BASE64_ORDERED",
    "BASE64_TEXT_ENCODING",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def decode() -> Callable[[str | bytes, Dialect], bytes]:
    """Inverse transform used to check round trips."""

    def _decode(encoded: str | bytes, dialect: Dialect = Dialect.STANDARD) -> bytes:
        raw = encoded.encode("ascii") if isinstance(encoded, str) else encoded
        raw = raw.replace(b"\n", b"")
        if dialect is Dialect.URL_SAFE:
            return base64.urlsafe_b64decode(raw)
        if dialect is Dialect.ORDERED:
            raw = raw.translate(_ORDERED_TO_STANDARD)
        return base64.b64decode(raw, validate=True)

    return _decode
