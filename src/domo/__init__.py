"""Domo: typed, identity-addressed repositories with change notification."""

__version__ = "0.1.0"

from .extensions import (
    add_aggregate_repository,
    add_singleton_repository,
    add_value,
    get_aggregate_repository,
    get_repository,
    get_singleton_repository,
    on_model_changed,
    on_models_changed,
)
from .manager import RepositoryManager
from .repository import (
    AggregateRepository,
    ChangeType,
    Model,
    Repository,
    RepositoryChange,
    SingletonRepository,
    UpdateResult,
)
from .settings import DomoSettings

__all__ = [
    # Engine
    "AggregateRepository",
    "Model",
    "Repository",
    "SingletonRepository",
    # Events
    "ChangeType",
    "RepositoryChange",
    "UpdateResult",
    # Registry
    "RepositoryManager",
    "DomoSettings",
    # Helpers
    "add_aggregate_repository",
    "add_singleton_repository",
    "add_value",
    "get_aggregate_repository",
    "get_repository",
    "get_singleton_repository",
    "on_model_changed",
    "on_models_changed",
]
