"""Model handle: the identity of one value stored in a repository."""

import logging
import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING
from uuid import UUID

from domo.exceptions import ModelDisposedError
from domo.repository.observer import ObserverManager
from domo.repository.protocols import ModelCallbackObserver, ModelObserver, UpdateResult

if TYPE_CHECKING:
    from domo.repository.repository import Repository

logger = logging.getLogger(__name__)


class Model[T]:
    """
    Identity handle for one value stored in a repository.

    A Model never holds its value. Reads and writes go through the owning
    repository, so every handle always sees the current value and every write
    is validated and announced by the repository. The repository is referenced
    weakly; a Model does not keep its repository alive.

    Lifecycle:
        Created by Repository.add, keeps its id across updates, and is disposed
        when deleted. A disposed Model raises ModelDisposedError on use.

    Example:
        ```python
        model = add_value(repo, 5)
        model.update(lambda v: v + 1)
        assert model.value == 6
        ```
    """

    def __init__(self, model_id: UUID, repository: "Repository[T]"):
        self._id = model_id
        self._repository_ref = weakref.ref(repository)
        self._disposed = False
        self._observers = ObserverManager[ModelObserver](
            observer_type_name="model",
            raise_errors=repository.settings.observer_errors == "raise",
        )

    @property
    def id(self) -> UUID:
        """Identifier of this model within its repository."""
        return self._id

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def repository(self) -> "Repository[T]":
        """
        The owning repository.

        Raises:
            ModelDisposedError: If the model was deleted or its repository no longer exists
        """
        repository = self._repository_ref()
        if self._disposed or repository is None:
            raise ModelDisposedError(self._id)
        return repository

    @property
    def value(self) -> T:
        """Current value, read from the owning repository."""
        return self.repository.get_value(self._id)

    @value.setter
    def value(self, new_value: T) -> None:
        # Routed through update(): equal or invalid values are silently not applied
        self.repository.update(self._id, lambda _: new_value)

    def update(self, transform: Callable[[T], T]) -> UpdateResult:
        """Apply `transform` to the current value through the owning repository."""
        return self.repository.update(self._id, transform)

    # =================================================================
    # Change notification
    # =================================================================

    def register_observer(self, observer: ModelObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: ModelObserver) -> None:
        self._observers.unregister(observer)

    def subscribe(self, callback: Callable[["Model[T]"], None]) -> ModelObserver:
        """
        Call `callback(model)` after every applied update of this model.

        Returns:
            The registered observer, to pass to unregister_observer()
        """
        observer = ModelCallbackObserver(callback)
        self._observers.register(observer)
        return observer

    def trigger_change_notification(self) -> None:
        """Notify this model's observers that its value was replaced."""
        self._observers.notify("on_model_changed", self)

    def dispose(self) -> None:
        """Invalidate the handle. Called by the repository on delete."""
        if self._disposed:
            return
        self._disposed = True
        self._observers.clear()
        logger.debug(f"Model {self._id} disposed")

    def __repr__(self) -> str:
        state = " disposed" if self._disposed else ""
        return f"<Model {self._id}{state}>"
