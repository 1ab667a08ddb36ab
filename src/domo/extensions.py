"""Typed accessors and subscription helpers over repositories and the manager.

These functions hold no state of their own. They fetch repositories with the
expected variant, create and register repositories in one call, and turn the
raw change stream into "this model changed" / "the model list changed"
callbacks.
"""

import logging
from collections.abc import Callable
from typing import Any
from uuid import UUID, uuid4

from domo.exceptions import RepositoryTypeMismatchError
from domo.manager import RepositoryManager
from domo.repository import (
    AggregateRepository,
    ChangeType,
    Model,
    Repository,
    RepositoryChange,
    RepositoryObserver,
    SingletonRepository,
    UpdateResult,
)
from domo.settings import DomoSettings

logger = logging.getLogger(__name__)


# =================================================================
# Typed fetch
# =================================================================


def get_repository[T](manager: RepositoryManager, value_type: type[T]) -> Repository[T]:
    """Fetch the repository for `value_type`, whichever variant it is."""
    return manager.get_repository(value_type)


def get_aggregate_repository[T](
    manager: RepositoryManager, value_type: type[T]
) -> AggregateRepository[T]:
    """
    Fetch the repository for `value_type`, which must be an aggregate.

    Raises:
        RepositoryNotFoundError: If no repository is registered for the type
        RepositoryTypeMismatchError: If the registered repository is a singleton
    """
    return _get_typed(manager, value_type, AggregateRepository)


def get_singleton_repository[T](
    manager: RepositoryManager, value_type: type[T]
) -> SingletonRepository[T]:
    """
    Fetch the repository for `value_type`, which must be a singleton.

    Raises:
        RepositoryNotFoundError: If no repository is registered for the type
        RepositoryTypeMismatchError: If the registered repository is an aggregate
    """
    return _get_typed(manager, value_type, SingletonRepository)


def _get_typed(manager: RepositoryManager, value_type: type, expected: type) -> Any:
    repository = manager.get_repository(value_type)
    if not isinstance(repository, expected):
        raise RepositoryTypeMismatchError(value_type, expected, type(repository))
    return repository


def delete_all_repositories(manager: RepositoryManager) -> None:
    """Delete (and dispose) every repository registered in `manager`."""
    logger.info(f"Deleting all {len(manager)} repositories")
    for repository in manager.get_repositories():
        manager.delete_repository(repository)


# =================================================================
# Creation and registration
# =================================================================


def create_aggregate_repository[T](
    value_type: type[T],
    validator: Callable[[T], bool] | None = None,
    settings: DomoSettings | None = None,
) -> AggregateRepository[T]:
    return AggregateRepository(value_type, validator=validator, settings=settings)


def create_singleton_repository[T](
    value_type: type[T],
    value: T | None = None,
    validator: Callable[[T], bool] | None = None,
    settings: DomoSettings | None = None,
) -> SingletonRepository[T]:
    return SingletonRepository(value_type, value, validator=validator, settings=settings)


def add_typed_repository[T](manager: RepositoryManager, repository: Repository[T]) -> Repository[T]:
    return manager.add_repository(repository)


def add_aggregate_repository[T](
    manager: RepositoryManager,
    value_type: type[T],
    validator: Callable[[T], bool] | None = None,
) -> AggregateRepository[T]:
    """Create an aggregate repository with the manager's settings and register it."""
    return manager.add_repository(
        create_aggregate_repository(value_type, validator, manager.settings)
    )


def add_singleton_repository[T](
    manager: RepositoryManager,
    value_type: type[T],
    value: T | None = None,
    validator: Callable[[T], bool] | None = None,
) -> SingletonRepository[T]:
    """Create a singleton repository with the manager's settings and register it."""
    return manager.add_repository(
        create_singleton_repository(value_type, value, validator, manager.settings)
    )


# =================================================================
# Values
# =================================================================


def add_value[T](repository: Repository[T], value: T | None = None) -> Model[T]:
    """Add `value` under a freshly generated identifier."""
    return repository.add(uuid4(), value)


def update_model[T](model: Model[T], transform: Callable[[T], T]) -> UpdateResult:
    return model.update(transform)


def update_singleton[T](
    repository: SingletonRepository[T], transform: Callable[[T], T]
) -> UpdateResult:
    return repository.model.update(transform)


# =================================================================
# Subscriptions
# =================================================================


def on_model_changed[T](
    repository: Repository[T], action: Callable[[Model[T]], None]
) -> RepositoryObserver:
    """
    Call `action(model)` whenever a model is added or updated.

    The model is looked up again from the change's model id, so `action`
    receives the live handle rather than a copy of the value.

    Returns:
        The registered observer, for Repository.unsubscribe()
    """

    def handle(change: RepositoryChange) -> None:
        if change.change_type in (ChangeType.ADDED, ChangeType.UPDATED):
            action(change.repository.get_model(change.model_id))

    return repository.subscribe(handle)


def on_models_changed[T](
    repository: Repository[T], action: Callable[[list[Model[T]]], None]
) -> RepositoryObserver:
    """
    Call `action(models)` with the full model list after every add, update or delete.

    Returns:
        The registered observer, for Repository.unsubscribe()
    """

    def handle(change: RepositoryChange) -> None:
        if change.change_type in (ChangeType.ADDED, ChangeType.UPDATED, ChangeType.REMOVED):
            action(change.repository.get_models())

    return repository.subscribe(handle)


# =================================================================
# Debugging
# =================================================================


def to_debug_string(model: Model[Any] | None) -> str:
    """Return "<id> <value>" for a model, or "null"."""
    if model is None:
        return "null"
    return f"{model.id} {model.value}"


def get_type_name(obj: object) -> str | None:
    """Class name of `obj`, or None for None."""
    if obj is None:
        return None
    return type(obj).__name__


def get_model_dictionary(repository: Repository[Any]) -> dict[UUID, Any]:
    """Snapshot of id -> current value for every model in the repository."""
    return {model.id: repository.get_value(model.id) for model in repository.get_models()}
