"""Shared fixtures: a store with a frozen clock and a clean environment."""

from __future__ import annotations

import os
from datetime import datetime

import pytest

from categories import KeywordClassifier
from ledger import TransactionStore

FIXED_NOW = datetime(2026, 10, 19, 10, 30, 0)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EXPENSO_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("EXPENSO_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(clock):
    return TransactionStore(clock=clock, date_format="%d/%m/%Y")


@pytest.fixture
def classifier():
    return KeywordClassifier.from_names()
