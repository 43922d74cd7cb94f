"""Errors raised by the fault query and clear API."""

from __future__ import annotations


class SovdError(Exception):
    """Base class of all fault query/clear errors."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SovdError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class BadArgumentError(SovdError):
    """An argument such as a path or fault code is invalid or unknown."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "bad argument"


class NotFoundError(SovdError):
    """The requested fault does not exist."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "not found"


class StorageError(SovdError):
    """The storage backend failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"storage error: {self.message}"