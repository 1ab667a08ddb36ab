"""
Custom exception hierarchy for Domo.

## Exception Hierarchy

```
DomoError (base)
├── RepositoryError
│   ├── ModelNotFoundError
│   ├── DuplicateModelError
│   ├── InvalidCardinalityError
│   ├── ModelDisposedError
│   └── RepositoryDisposedError
├── ManagerError
│   ├── RepositoryNotFoundError
│   ├── DuplicateRepositoryError
│   └── RepositoryTypeMismatchError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `DomoError`, which carries a one-line
`message` (also its `str()`), an optional `hint` for the caller and a longer
`detail` for logs.

`ModelNotFoundError` and `RepositoryNotFoundError` are also `KeyError`s, and
`RepositoryTypeMismatchError` is also a `TypeError`.

### Example: Missing Model

```python
from domo.exceptions import ModelNotFoundError

try:
    value = repo.get_value(model_id)
except ModelNotFoundError as e:
    print(e, e.hint, sep="\n")
```

A rejected update is not an exception: `Repository.update` reports it as
`UpdateResult.REJECTED`.
"""

from .base import DomoError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .repository import (
    DuplicateModelError,
    DuplicateRepositoryError,
    InvalidCardinalityError,
    ManagerError,
    ModelDisposedError,
    ModelNotFoundError,
    RepositoryDisposedError,
    RepositoryError,
    RepositoryNotFoundError,
    RepositoryTypeMismatchError,
)

__all__ = [
    # Base
    "DomoError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Repository
    "DuplicateModelError",
    "InvalidCardinalityError",
    "ModelDisposedError",
    "ModelNotFoundError",
    "RepositoryDisposedError",
    "RepositoryError",
    # Manager
    "DuplicateRepositoryError",
    "ManagerError",
    "RepositoryNotFoundError",
    "RepositoryTypeMismatchError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
