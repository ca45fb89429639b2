from dataclasses import dataclass

from userdir.domain.types import ErrorKind


@dataclass(frozen=True, kw_only=True)
class OperationResult[T]:
    """Uniform outcome of a client call, whichever transport carried it."""

    success: bool
    message: str
    data: T | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, message: str, data: T | None = None) -> "OperationResult[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, error_kind: ErrorKind | None) -> "OperationResult[T]":
        return cls(success=False, message=message, error_kind=error_kind)
