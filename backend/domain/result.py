"""
Result Value Object

Outcome of an operation that can fail in an expected way. Expected failures
(such as a rejected payload) travel back to the caller as values instead of
being raised.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar('T')
E = TypeVar('E', bound=Exception)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    value: Optional[T] = None
    error: Optional[E] = None

    @classmethod
    def success(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> "Result[T, E]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            The carried error if the result is a failure
        """
        if self.error is not None:
            raise self.error
        return self.value
