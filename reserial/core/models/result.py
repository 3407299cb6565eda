from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from reserial.core.errors import ResponseSerializationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a serializer call: exactly one value or exactly one error.

    The success tag is explicit because a successfully parsed document
    may itself be None (a JSON `null`). Use the `success` and `failure`
    constructors rather than building instances by hand.
    """
    ok: bool
    value: T | None = None
    error: ResponseSerializationError | None = None

    def __post_init__(self):
        if self.ok and self.error is not None:
            raise ValueError("A successful Result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("A failed Result must carry an error")
        if not self.ok and self.value is not None:
            raise ValueError("A failed Result cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ResponseSerializationError) -> "Result[T]":
        return cls(ok=False, error=error)

    @property
    def is_success(self) -> bool:
        return self.ok

    @property
    def is_failure(self) -> bool:
        return not self.ok

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if not self.ok:
            raise self.error
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the value of a successful Result; failures pass through."""
        if not self.ok:
            return Result.failure(self.error)
        return Result.success(fn(self.value))
