"""Result-or-error wrapper returned by transaction store operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from finance_tracker.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a store operation: either a value or a domain error.

    Store adapters never raise for expected backend failures; they return
    a failed result and let the caller decide whether to raise.
    """

    value: Optional[T] = None
    error: Optional[DomainException] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainException) -> "OperationResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value, or raise the carried error.

        Raises:
            DomainException: If the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value
