"""Global test fixtures."""

import io
import os
import random
from pathlib import Path

import pytest

from debug_playground.config import Settings
from debug_playground.models.person import Person
from debug_playground.utils.console import Console

ENV_PREFIX = "DEBUG_PLAYGROUND_"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep stray .env files and prefixed variables away from Settings."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def test_settings(isolated_env: Path) -> Settings:
    """Settings with no delay and a fixed seed."""
    return Settings(step_delay_seconds=0.0, random_seed=1234)


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def console(stream: io.StringIO) -> Console:
    """Console writing to an in-memory stream."""
    return Console(stream=stream)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def person() -> Person:
    """Sample record."""
    return Person(name="Alice", age=25)
