"""Repository and manager exceptions.

This module defines exceptions raised by the store itself:
- RepositoryError: Base class for errors inside a single repository
- ManagerError: Base class for errors in the repository registry

Lookup failures also derive from KeyError and type mismatches from TypeError,
so callers that only know the builtin protocols can still catch them.
"""

from uuid import UUID

from .base import DomoError


class RepositoryError(DomoError):
    """An operation on a repository could not be performed."""
    pass


class ModelNotFoundError(RepositoryError, KeyError):
    """No model with the given identifier exists in the repository."""

    def __init__(self, model_id: UUID, repository_name: str):
        """
        Initialize model not found error.

        Args:
            model_id: The identifier that was looked up
            repository_name: Display name of the repository searched
        """
        super().__init__(
            message=f"Model {model_id} not found in {repository_name}",
            detail=f"Lookup of {model_id} failed: id absent from {repository_name}",
            hint="The model may have been deleted. Re-read the model list with get_models()",
        )
        self.model_id = model_id
        self.repository_name = repository_name


class DuplicateModelError(RepositoryError):
    """A model with the given identifier already exists."""

    def __init__(self, model_id: UUID, repository_name: str):
        super().__init__(
            message=f"Model {model_id} already exists in {repository_name}",
            hint="Let the repository generate identifiers (see domo.extensions.add_value)",
        )
        self.model_id = model_id
        self.repository_name = repository_name


class InvalidCardinalityError(RepositoryError):
    """An operation would give a singleton repository other than exactly one model."""

    def __init__(self, repository_name: str, operation: str):
        """
        Initialize invalid cardinality error.

        Args:
            repository_name: Display name of the singleton repository
            operation: The rejected operation (e.g. "add", "delete")
        """
        super().__init__(
            message=f"Singleton repository {repository_name} must hold exactly one model",
            detail=f"Rejected {operation} on singleton repository {repository_name}",
            hint="Use the singleton's value or update_value() instead of adding or deleting models",
        )
        self.repository_name = repository_name
        self.operation = operation


class ModelDisposedError(RepositoryError):
    """The model was deleted from its repository and can no longer be used."""

    def __init__(self, model_id: UUID):
        super().__init__(
            message=f"Model {model_id} has been disposed",
            hint="Deleted models must not be reused; add a new model instead",
        )
        self.model_id = model_id


class RepositoryDisposedError(RepositoryError):
    """The repository was disposed and rejects further mutation."""

    def __init__(self, repository_name: str):
        super().__init__(message=f"Repository {repository_name} has been disposed")
        self.repository_name = repository_name


class ManagerError(DomoError):
    """An operation on the repository manager could not be performed."""
    pass


class RepositoryNotFoundError(ManagerError, KeyError):
    """No repository is registered for the requested value type."""

    def __init__(self, value_type: type):
        type_name = getattr(value_type, "__name__", str(value_type))
        super().__init__(
            message=f"No repository registered for {type_name}",
            hint=f"Register one first, e.g. add_aggregate_repository(manager, {type_name})",
        )
        self.value_type = value_type


class DuplicateRepositoryError(ManagerError):
    """A repository for the value type is already registered."""

    def __init__(self, value_type: type):
        type_name = getattr(value_type, "__name__", str(value_type))
        super().__init__(
            message=f"A repository for {type_name} is already registered",
            hint="Fetch the existing repository with get_repository() or delete it first",
        )
        self.value_type = value_type


class RepositoryTypeMismatchError(ManagerError, TypeError):
    """The registered repository is not of the requested kind."""

    def __init__(self, value_type: type, expected: type, actual: type):
        """
        Initialize type mismatch error.

        Args:
            value_type: The value type that was looked up
            expected: The repository class the caller asked for
            actual: The repository class actually registered
        """
        type_name = getattr(value_type, "__name__", str(value_type))
        super().__init__(
            message=(
                f"Repository for {type_name} is a {actual.__name__}, not a {expected.__name__}"
            ),
        )
        self.value_type = value_type
        self.expected = expected
        self.actual = actual
