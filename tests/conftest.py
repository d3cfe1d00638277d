"""
Pytest config.

The app is a handful of top-level modules run with `streamlit run main.py`, so
local imports like `import auth` rely on the repo root being on sys.path. Pin
that here so collection works no matter where pytest is invoked from.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_on_syspath(path: Path) -> None:
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_ensure_on_syspath(Path(__file__).resolve().parents[1])
# AppTest scripts import the shared fakes by module name
_ensure_on_syspath(Path(__file__).resolve().parent)

from fakes import FakeProvider  # noqa: E402
from firebase_auth import AuthResult  # noqa: E402


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(result=AuthResult.failure("The email address is badly formatted."))
