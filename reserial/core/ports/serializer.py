from os import PathLike
from typing import Any, Protocol, TypeVar

from reserial.core.models.response import Response
from reserial.core.models.result import Result

T_co = TypeVar("T_co", covariant=True)


class ResponseSerializer(Protocol[T_co]):
    """
    Turns the outcome of a completed HTTP transaction into a Result.

    Every serializer kind implements both entry points and produces
    the same result shape from either of them. Implementations must be:
    - synchronous
    - stateless after construction (safe to share between threads)
    - total: failures are returned in the Result, never raised

    `request` is accepted for diagnostics only and never influences
    the outcome.
    """

    def serialize(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[T_co]:
        """Serialize an in-memory response body."""

    def serialize_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[T_co]:
        """
        Serialize a response body that was downloaded to disk.

        The file is read in full and released before returning.
        """
