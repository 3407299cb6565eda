from typing import Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict


class _Null:
    """
    Value produced by structured serializers for an allowed empty body.

    It is distinct from None, which is what a literal `null` document
    parses to.
    """
    _instance: "_Null | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL"

    def __reduce__(self):
        return _Null, ()


NULL = _Null()


@runtime_checkable
class EmptyResponse(Protocol):
    """
    Capability of a decode target to be built from an absent body.

    Typed serializers only call `empty_value()` when the empty-body
    policy accepts a missing body (e.g. 204 No Content). Targets that
    do not provide it cannot be used for such responses; this is a
    caller error reported as `invalid_empty_response`.
    """

    @classmethod
    def empty_value(cls) -> Self:
        """Return the instance standing for "no content"."""


class Empty(BaseModel):
    """Target shape for endpoints that answer without a meaningful body."""
    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty_value(cls) -> "Empty":
        return cls()
