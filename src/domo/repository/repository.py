"""Repository engine: typed, identity-addressed storage with change events."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from uuid import UUID, uuid4

from pydantic import BaseModel, ValidationError

from domo.exceptions import (
    DuplicateModelError,
    InvalidCardinalityError,
    ModelNotFoundError,
    RepositoryDisposedError,
)
from domo.repository.model import Model
from domo.repository.observer import ObserverManager
from domo.repository.protocols import (
    CallbackObserver,
    ChangeType,
    RepositoryChange,
    RepositoryObserver,
    UpdateResult,
)
from domo.settings import DomoSettings

logger = logging.getLogger(__name__)


class Repository[T](ABC):
    """
    Generic container owning every stored value of one value type.

    Each value is addressed by a UUID and represented by a Model handle. All
    mutation goes through add/update/delete, and each applied mutation emits
    one RepositoryChange to the registered observers before the call returns.

    Value-type contract:
        - `value_type()` with no arguments returns a valid "zero" instance
        - instances compare structurally with `==`

    Threading:
        Not thread-safe and deliberately lock-free. Observers run synchronously
        inside the mutating call and may re-enter this or any other repository;
        update cycles between observers are the caller's responsibility.

    Usage Example:
        ```python
        repo = AggregateRepository(int)
        repo.subscribe(lambda change: print(change.change_type, change.new_value))

        model = repo.add(uuid4(), 5)
        repo.update(model.id, lambda v: v + 1)   # UpdateResult.APPLIED
        repo.update(model.id, lambda v: v)       # UpdateResult.NO_OP
        repo.delete(model.id)
        ```
    """

    def __init__(
        self,
        value_type: type[T],
        value: T | None = None,
        validator: Callable[[T], bool] | None = None,
        settings: DomoSettings | None = None,
    ):
        """
        Initialize the repository.

        Args:
            value_type: The type of every value stored here
            value: Default value (seed used by singletons); `value_type()` if None
            validator: Predicate gating which values may be stored. Defaults to
                       `default_validator`.
            settings: Store settings (observer error policy, change logging)
        """
        self.id = uuid4()
        self._value_type = value_type
        self._default_value = value if value is not None else value_type()
        self._validator = validator
        self._settings = settings or DomoSettings()
        self._entries: dict[UUID, tuple[T, Model[T]]] = {}
        self._disposed = False

        self._observers = ObserverManager[RepositoryObserver](
            observer_type_name="repository",
            raise_errors=self._settings.observer_errors == "raise",
        )

        logger.info(f"{self.name} created")

    # =================================================================
    # Properties
    # =================================================================

    @property
    @abstractmethod
    def is_singleton(self) -> bool:
        """True if this repository holds exactly one model."""

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    @property
    def default_value(self) -> T:
        return self._default_value

    @property
    def settings(self) -> DomoSettings:
        return self._settings

    @property
    def name(self) -> str:
        """Display name used in logs and error messages, e.g. 'AggregateRepository[int]'."""
        return f"{type(self).__name__}[{self._value_type.__name__}]"

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: RepositoryObserver) -> None:
        """
        Register an observer to receive change events.

        Observers are notified in registration order.
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: RepositoryObserver) -> None:
        self._observers.unregister(observer)

    def subscribe(self, callback: Callable[[RepositoryChange], None]) -> RepositoryObserver:
        """
        Register a plain callable as an observer.

        Returns:
            The observer wrapping `callback`; pass it to unsubscribe()
        """
        observer = CallbackObserver(callback)
        self._observers.register(observer)
        return observer

    def unsubscribe(self, observer: RepositoryObserver) -> None:
        self._observers.unregister(observer)

    def notify_repository_changed(
        self,
        change_type: ChangeType,
        model_id: UUID,
        new_value: T | None,
        old_value: T | None,
    ) -> None:
        """Build a RepositoryChange and deliver it to every observer."""
        change = RepositoryChange(
            change_type=change_type,
            model_id=model_id,
            new_value=new_value,
            old_value=old_value,
            repository=self,
        )
        level = logging.INFO if self._settings.log_changes else logging.DEBUG
        logger.log(
            level,
            f"{self.name} {change_type.value} {model_id}: {old_value!r} -> {new_value!r}",
        )
        self._observers.notify("on_repository_changed", change)

    # =================================================================
    # Values and validation
    # =================================================================

    def create(self) -> T:
        """Return a fresh zero instance of the value type."""
        return self._value_type()

    def force_valid(self, value: T | None) -> T:
        """Return `value` if it is valid, otherwise a freshly created zero instance."""
        if value is None or not self.validate(value):
            return self.create()
        return value

    def validate(self, value: T | None) -> bool:
        """Decide whether `value` may be stored in this repository."""
        if value is None:
            return False
        if self._validator is not None:
            return bool(self._validator(value))
        return default_validator(self._value_type, value)

    # =================================================================
    # Model Access
    # =================================================================

    def get_model(self, model_id: UUID) -> Model[T]:
        """
        Get the Model handle for an identifier.

        Raises:
            ModelNotFoundError: If no model has this identifier
        """
        return self._entry(model_id)[1]

    def get_value(self, model_id: UUID) -> T:
        """
        Get the current value for an identifier.

        Raises:
            ModelNotFoundError: If no model has this identifier
        """
        return self._entry(model_id)[0]

    def get_models(self) -> list[Model[T]]:
        """Snapshot of all current Model handles. Order is not guaranteed."""
        return [model for _, model in self._entries.values()]

    def model_exists(self, model_id: UUID) -> bool:
        return model_id in self._entries

    def _entry(self, model_id: UUID) -> tuple[T, Model[T]]:
        try:
            return self._entries[model_id]
        except KeyError:
            raise ModelNotFoundError(model_id, self.name) from None

    # =================================================================
    # Model Mutation
    # =================================================================

    def add(self, model_id: UUID, value: T | None = None) -> Model[T]:
        """
        Add a new model.

        Args:
            model_id: Identifier for the new model (see extensions.add_value for a generated one)
            value: Initial value; None or an invalid value is replaced by create()

        Returns:
            The new Model handle

        Raises:
            TypeError: If `model_id` is not a UUID
            InvalidCardinalityError: If this is a singleton that already holds its model
            DuplicateModelError: If `model_id` is already in use

        Events:
            Emits ADDED with new_value = the stored value
        """
        self._check_not_disposed()
        if not isinstance(model_id, UUID):
            raise TypeError(f"Model id must be a UUID, got {type(model_id).__name__}: {model_id!r}")
        value = self.force_valid(value)
        if self.is_singleton and self._entries:
            raise InvalidCardinalityError(self.name, "add")
        if model_id in self._entries:
            raise DuplicateModelError(model_id, self.name)

        model = Model(model_id, self)
        self._entries[model_id] = (value, model)
        self.notify_repository_changed(ChangeType.ADDED, model_id, value, None)
        return model

    def update(self, model_id: UUID, transform: Callable[[T], T]) -> UpdateResult:
        """
        Replace a model's value with `transform(current)`.

        Returns:
            NO_OP if the new value equals the current one, REJECTED if it fails
            validation, APPLIED otherwise. Only APPLIED changes state or emits
            events.

        Raises:
            ModelNotFoundError: If no model has this identifier

        Events:
            On APPLIED: the model's own observers, then UPDATED with old/new values.
            UPDATED is sent even when a model observer raises under
            observer_errors="raise"; that error is re-raised afterwards.
        """
        self._check_not_disposed()
        old_value, model = self._entry(model_id)
        new_value = transform(old_value)

        if old_value == new_value:
            logger.debug(f"{self.name} update of {model_id} is a no-op")
            return UpdateResult.NO_OP

        if not self.validate(new_value):
            logger.debug(f"{self.name} rejected invalid value for {model_id}: {new_value!r}")
            return UpdateResult.REJECTED

        self._entries[model_id] = (new_value, model)
        try:
            model.trigger_change_notification()
        finally:
            self.notify_repository_changed(ChangeType.UPDATED, model_id, new_value, old_value)
        return UpdateResult.APPLIED

    def delete(self, model_id: UUID) -> None:
        """
        Delete a model and dispose its handle.

        Raises:
            ModelNotFoundError: If no model has this identifier

        Events:
            Emits REMOVED with old_value = the deleted value
        """
        self._check_not_disposed()
        old_value, model = self._entry(model_id)
        model.dispose()
        del self._entries[model_id]
        self.notify_repository_changed(ChangeType.REMOVED, model_id, None, old_value)

    def clear(self) -> None:
        """Delete every model, one REMOVED event each."""
        for model_id in list(self._entries):
            self.delete(model_id)

    def dispose(self) -> None:
        """
        Tear the repository down.

        Observers are dropped first, so removing the models emits nothing.
        Later mutations raise RepositoryDisposedError.
        """
        if self._disposed:
            return
        self._observers.clear()
        for _, model in self._entries.values():
            model.dispose()
        self._entries.clear()
        self._disposed = True
        logger.info(f"{self.name} disposed")

    def _check_not_disposed(self) -> None:
        if self._disposed:
            raise RepositoryDisposedError(self.name)

    # =================================================================
    # Container protocol
    # =================================================================

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._entries

    def __iter__(self) -> Iterator[Model[T]]:
        return iter(self.get_models())

    def __repr__(self) -> str:
        return f"<{self.name} id={self.id} count={len(self._entries)}>"


_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int, float),
    complex: (int, float, complex),
}


def default_validator(value_type: type, value: object) -> bool:
    """
    Validation used when a repository has no explicit validator.

    The value must be an instance of `value_type`, where an int also counts
    as a float and an int or float as a complex. Pydantic models are also
    re-validated from their own dump, since `model_copy(update=...)` does not
    validate the updated fields.
    """
    if not isinstance(value, _NUMERIC_PROMOTIONS.get(value_type, value_type)):
        return False
    if isinstance(value, BaseModel):
        try:
            type(value).model_validate(value.model_dump(by_alias=True))
        except ValidationError as e:
            logger.debug(f"{type(value).__name__} failed validation: {e}")
            return False
    return True


class AggregateRepository[T](Repository[T]):
    """Repository holding any number of models, e.g. independent log entries."""

    @property
    def is_singleton(self) -> bool:
        return False


class SingletonRepository[T](Repository[T]):
    """
    Repository holding exactly one model for its whole life.

    The model is created at construction from the default value. `add` raises
    InvalidCardinalityError, and so do `delete` and `clear`, so the repository
    can never be empty or hold a second model.

    Example:
        ```python
        prefs = SingletonRepository(ViewSettings)
        prefs.update_value(lambda v: v.model_copy(update={"view_type": ViewTypeEnum.TEXT}))
        print(prefs.value.view_type)
        ```
    """

    def __init__(
        self,
        value_type: type[T],
        value: T | None = None,
        validator: Callable[[T], bool] | None = None,
        settings: DomoSettings | None = None,
    ):
        super().__init__(value_type, value, validator, settings)
        self._model = self.add(uuid4(), self.default_value)

    @property
    def is_singleton(self) -> bool:
        return True

    @property
    def model(self) -> Model[T]:
        return self._model

    @property
    def value(self) -> T:
        return self._model.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._model.value = new_value

    def update_value(self, transform: Callable[[T], T]) -> UpdateResult:
        """Update the sole model's value. See Repository.update."""
        return self._model.update(transform)

    def delete(self, model_id: UUID) -> None:
        raise InvalidCardinalityError(self.name, "delete")
