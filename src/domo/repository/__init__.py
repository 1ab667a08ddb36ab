"""Repository engine.

- **Repository**: generic container for one value type (abstract)
- **AggregateRepository**: any number of models
- **SingletonRepository**: exactly one model
- **Model**: identity handle for one stored value
- **RepositoryChange / ChangeType**: change events
- **UpdateResult**: APPLIED / NO_OP / REJECTED outcome of an update
- **ObserverManager**: ordered observer list shared by the above
"""

from domo.repository.model import Model
from domo.repository.observer import ObserverManager
from domo.repository.protocols import (
    CallbackObserver,
    ChangeType,
    ManagerEvent,
    ManagerObserver,
    ModelCallbackObserver,
    ModelObserver,
    RepositoryChange,
    RepositoryObserver,
    UpdateResult,
)
from domo.repository.repository import (
    AggregateRepository,
    Repository,
    SingletonRepository,
    default_validator,
)

__all__ = [
    # Engine
    "AggregateRepository",
    "Model",
    "Repository",
    "SingletonRepository",
    "default_validator",
    # Events
    "ChangeType",
    "ManagerEvent",
    "RepositoryChange",
    "UpdateResult",
    # Observers
    "CallbackObserver",
    "ManagerObserver",
    "ModelCallbackObserver",
    "ModelObserver",
    "ObserverManager",
    "RepositoryObserver",
]
