"""Generic observer list manager.

Repositories, models and the repository manager each own one ObserverManager.
Observers are notified in registration order, synchronously, on the thread
that made the change. There is no lock: an observer may register, unregister
or mutate a repository from inside its callback, and that work runs nested in
the original call.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Ordered observer list with registration and notification.

    Type Parameters:
        T: The observer protocol type (e.g., RepositoryObserver, ModelObserver)

    Example:
        ```python
        class MyRepository:
            def __init__(self):
                self._observers = ObserverManager[RepositoryObserver]()

            def register_observer(self, observer: RepositoryObserver) -> None:
                self._observers.register(observer)

            def _notify(self, change):
                self._observers.notify("on_repository_changed", change)
        ```
    """

    def __init__(self, observer_type_name: str = "observer", raise_errors: bool = False):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the observer type for logging (e.g., "repository", "model")
            raise_errors: If True, the first exception raised by an observer
                propagates out of notify() and the remaining observers are skipped.
                If False, failures are logged and notification continues.
        """
        self._observers: list[T] = []
        self._observer_type_name = observer_type_name
        self.raise_errors = raise_errors

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        if observer not in self._observers:
            self._observers.append(observer)
            logger.debug(f"Registered {self._observer_type_name} observer: {observer}")
        else:
            logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
        else:
            logger.warning(
                f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
            )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Notify all observers by calling their callback method.

        The observer list is copied first, so observers registered or removed
        during notification take effect from the next notification on.

        Args:
            callback_name: Name of the callback method to call (e.g., 'on_repository_changed')
            *args: Positional arguments to pass to the callback
            **kwargs: Keyword arguments to pass to the callback

        Raises:
            Exception: Whatever the first failing observer raised, when raise_errors is set.
        """
        for observer in list(self._observers):
            try:
                callback = getattr(observer, callback_name)
                callback(*args, **kwargs)
            except Exception as e:
                if self.raise_errors:
                    raise
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        count = len(self._observers)
        self._observers.clear()
        if count > 0:
            logger.debug(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return len(self._observers) > 0
