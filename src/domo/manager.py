"""Repository manager: a registry of repositories keyed by value type."""

import logging
from collections.abc import Iterator
from typing import Any
from uuid import UUID

from domo.exceptions import DuplicateRepositoryError, RepositoryNotFoundError
from domo.repository import ManagerEvent, ManagerObserver, ObserverManager, Repository
from domo.settings import DomoSettings

logger = logging.getLogger(__name__)


class RepositoryManager:
    """
    Registry owning one repository per value type.

    Lookups are keyed by the value type itself, so `get_repository(LogItem)`
    returns the repository typed as `Repository[LogItem]`. Repositories never
    call back into the manager; registering one only places it in this
    container.

    Usage Example:
        ```python
        manager = RepositoryManager()
        add_aggregate_repository(manager, LogItem)
        add_singleton_repository(manager, User)

        logs = get_aggregate_repository(manager, LogItem)
        add_value(logs, LogItem(message="started"))
        ```
    """

    def __init__(self, settings: DomoSettings | None = None):
        """
        Initialize an empty manager.

        Args:
            settings: Default settings handed to repositories created through
                      the helpers in domo.extensions
        """
        self._settings = settings or DomoSettings()
        self._repositories: dict[type, Repository[Any]] = {}
        self._observers = ObserverManager[ManagerObserver](
            observer_type_name="manager",
            raise_errors=self._settings.observer_errors == "raise",
        )

    @property
    def settings(self) -> DomoSettings:
        return self._settings

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ManagerObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: ManagerObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Registry
    # =================================================================

    def add_repository[R: Repository[Any]](self, repository: R) -> R:
        """
        Register a repository under its value type.

        Returns:
            The same repository, for chaining

        Raises:
            DuplicateRepositoryError: If the value type already has a repository

        Events:
            Emits REPOSITORY_ADDED
        """
        value_type = repository.value_type
        if value_type in self._repositories:
            raise DuplicateRepositoryError(value_type)

        self._repositories[value_type] = repository
        logger.info(f"Registered {repository.name}")
        self._observers.notify("on_manager_event", ManagerEvent.REPOSITORY_ADDED, repository)
        return repository

    def get_repository[T](self, value_type: type[T]) -> Repository[T]:
        """
        Get the repository for a value type.

        Raises:
            RepositoryNotFoundError: If no repository is registered for it
        """
        try:
            return self._repositories[value_type]
        except KeyError:
            raise RepositoryNotFoundError(value_type) from None

    def get_repository_by_id(self, repository_id: UUID) -> Repository[Any]:
        """
        Get a repository by its own id (as recorded in e.g. undo items).

        Raises:
            KeyError: If no registered repository has this id
        """
        for repository in self._repositories.values():
            if repository.id == repository_id:
                return repository
        raise KeyError(repository_id)

    def get_repositories(self) -> list[Repository[Any]]:
        """Snapshot of all registered repositories, in registration order."""
        return list(self._repositories.values())

    def has_repository(self, value_type: type) -> bool:
        return value_type in self._repositories

    def delete_repository(self, repository: Repository[Any]) -> None:
        """
        Unregister and dispose a repository.

        Raises:
            RepositoryNotFoundError: If this repository is not registered here

        Events:
            Emits REPOSITORY_REMOVED after the repository is disposed
        """
        value_type = repository.value_type
        if self._repositories.get(value_type) is not repository:
            raise RepositoryNotFoundError(value_type)

        del self._repositories[value_type]
        repository.dispose()
        logger.info(f"Deleted {repository.name}")
        self._observers.notify("on_manager_event", ManagerEvent.REPOSITORY_REMOVED, repository)

    def __len__(self) -> int:
        return len(self._repositories)

    def __contains__(self, value_type: object) -> bool:
        return value_type in self._repositories

    def __iter__(self) -> Iterator[Repository[Any]]:
        return iter(self.get_repositories())
