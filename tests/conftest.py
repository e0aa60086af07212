"""Shared fixtures for envgg tests."""

import os
from typing import Dict, List, Mapping, Sequence, Tuple

import pytest

from envgg.config import reset_settings
from envgg.logger import StructuredLogger
from envgg.secrets import MemorySecretStore


class RecordingRunner:
    """ProcessRunner that records calls instead of starting processes."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: List[Tuple[str, List[str], Dict[str, str]]] = []

    def run(self, command: str, args: Sequence[str], env: Mapping[str, str]) -> int:
        self.calls.append((command, list(args), dict(env)))
        return self.status


@pytest.fixture(autouse=True)
def clean_envgg_environment(monkeypatch):
    """Drop ENVGG_* variables and cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("ENVGG_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store() -> MemorySecretStore:
    return MemorySecretStore()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    return StructuredLogger(name="envgg-test", level=100)
