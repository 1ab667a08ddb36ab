"""Protocol definitions for the repository engine.

This module defines the events and observer protocols of the store:
- ChangeType / RepositoryChange: what a repository reports after a mutation
- UpdateResult: outcome of Repository.update
- RepositoryObserver / ModelObserver / ManagerObserver: observer protocols
- ManagerEvent: repository registration events
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from domo.repository.model import Model
    from domo.repository.repository import Repository


class ChangeType(Enum):
    """Kinds of change a repository reports."""

    ADDED = "added"  # A model was added
    REMOVED = "removed"  # A model was deleted
    UPDATED = "updated"  # A model's value was replaced


class UpdateResult(Enum):
    """
    Outcome of Repository.update.

    Only APPLIED is truthy, so the result can be used directly as the
    "did the update apply" boolean while still telling a no-op apart from a
    validation rejection.
    """

    APPLIED = "applied"  # Value replaced and UPDATED emitted
    NO_OP = "no_op"  # Transform returned an equal value
    REJECTED = "rejected"  # Transform returned a value that failed validation

    def __bool__(self) -> bool:
        return self is UpdateResult.APPLIED


class ManagerEvent(Enum):
    """Events from the repository manager."""

    REPOSITORY_ADDED = "repository_added"
    REPOSITORY_REMOVED = "repository_removed"


class RepositoryChange(BaseModel):
    """
    Immutable record of one change to a repository.

    `new_value` is set for ADDED and UPDATED, `old_value` for REMOVED and
    UPDATED; the other is None.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    change_type: ChangeType
    model_id: UUID
    new_value: Any = None
    old_value: Any = None
    repository: Any


@runtime_checkable
class RepositoryObserver(Protocol):
    """
    Observer that receives repository change events.

    Threading:
        Called synchronously from inside the add/update/delete call that made
        the change, before that call returns. The observer may call back into
        the same or another repository.
    """

    def on_repository_changed(self, change: RepositoryChange) -> None:
        """Handle one change to the repository."""
        ...


@runtime_checkable
class ModelObserver(Protocol):
    """Observer of a single model's value, notified after each applied update."""

    def on_model_changed(self, model: "Model[Any]") -> None:
        """Handle a change to the model's value."""
        ...


@runtime_checkable
class ManagerObserver(Protocol):
    """Observer of repositories being added to or removed from a manager."""

    def on_manager_event(self, event: ManagerEvent, repository: "Repository[Any]") -> None:
        """Handle a registration event."""
        ...


class CallbackObserver:
    """Adapts a plain callable to the RepositoryObserver protocol."""

    def __init__(self, callback: Callable[[RepositoryChange], None]):
        self.callback = callback

    def on_repository_changed(self, change: RepositoryChange) -> None:
        self.callback(change)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"CallbackObserver({name})"


class ModelCallbackObserver:
    """Adapts a plain callable to the ModelObserver protocol."""

    def __init__(self, callback: Callable[["Model[Any]"], None]):
        self.callback = callback

    def on_model_changed(self, model: "Model[Any]") -> None:
        self.callback(model)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"ModelCallbackObserver({name})"
