"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from domo.manager import RepositoryManager
from domo.repository import AggregateRepository, RepositoryChange, SingletonRepository
from domo.settings import DomoSettings


class ChangeRecorder:
    """Observer that records every change it receives."""

    def __init__(self):
        self.changes: list[RepositoryChange] = []

    def on_repository_changed(self, change: RepositoryChange) -> None:
        self.changes.append(change)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def raising_settings():
    """Settings that propagate observer exceptions."""
    return DomoSettings(observer_errors="raise")


@pytest.fixture
def int_repo():
    """Create an aggregate repository of ints."""
    return AggregateRepository(int)


@pytest.fixture
def int_singleton():
    """Create a singleton repository of ints seeded with 0."""
    return SingletonRepository(int, 0)


@pytest.fixture
def recorder():
    """Create a change recorder."""
    return ChangeRecorder()


@pytest.fixture
def manager():
    """Create an empty repository manager."""
    return RepositoryManager()
