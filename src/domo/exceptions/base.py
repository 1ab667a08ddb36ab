"""Root of the Domo exception hierarchy."""

from typing import Optional


class DomoError(Exception):
    """
    Base exception for all Domo errors.

    Attributes:
        message: One-line description, also what str() returns
        hint: What the caller can do about it, shown by the CLI under the message
        detail: Longer description for logs (defaults to message)
    """

    def __init__(self, message: str, hint: Optional[str] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.detail = detail or message

    def __str__(self) -> str:
        return self.message
