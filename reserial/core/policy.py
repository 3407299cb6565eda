from collections.abc import Iterable
from dataclasses import dataclass

from reserial.core.models.response import Response

DEFAULT_EMPTY_RESPONSE_CODES: frozenset[int] = frozenset({204, 205})
"""
Status codes whose responses carry no body by definition:
204 No Content and 205 Reset Content.
"""


def is_empty_body_allowed(
    status_code: int,
    body_length: int,
    empty_codes: Iterable[int] = DEFAULT_EMPTY_RESPONSE_CODES,
) -> bool:
    """
    Decide whether a missing or zero-length body is a valid result
    for the given status code.

    The policy only gates absence: a non-empty body is never subject
    to it and is always decoded normally.
    """
    return body_length == 0 and status_code in empty_codes


@dataclass(frozen=True)
class EmptyBodyPolicy:
    """
    Allow-list of status codes for which an empty body is accepted.

    A single policy instance is shared by every serializer built from
    the same configuration, so all serializer kinds take the same
    decision for the same response.
    """

    codes: frozenset[int] = DEFAULT_EMPTY_RESPONSE_CODES

    def __post_init__(self):
        object.__setattr__(self, "codes", frozenset(self.codes))

    @classmethod
    def extended(cls, *codes: int) -> "EmptyBodyPolicy":
        """Default allow-list plus the given status codes."""
        return cls(DEFAULT_EMPTY_RESPONSE_CODES | frozenset(codes))

    def allows(self, response: Response | None, body_length: int) -> bool:
        # Without a response there is no status code to justify emptiness.
        if response is None:
            return False
        return is_empty_body_allowed(response.status_code, body_length, self.codes)
