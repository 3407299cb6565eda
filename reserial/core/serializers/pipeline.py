import logging
from os import PathLike
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

from reserial.core.errors import FailureKind, ResponseSerializationError
from reserial.core.models.response import Response
from reserial.core.models.result import Result
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.preprocess import PassthroughPreprocessor

T = TypeVar("T")

DecodeFn = Callable[[bytes, Response | None], T]
"""
Kind-specific decode step. Receives a present body (already
preprocessed) and the response metadata. Signals failure by raising
ResponseSerializationError.
"""

EmptyFn = Callable[[], T]
"""
Builds the value returned when the empty-body policy accepts a missing
body. May raise ResponseSerializationError.
"""


def read_body(file: str | PathLike) -> bytes:
    """
    Read a downloaded body in full. The handle is closed on every
    exit path, including read errors.
    """
    with open(file, "rb") as fp:
        return fp.read()


class SerializationPipeline(Generic[T]):
    """
    Control flow shared by every serializer kind.

        upstream error -> body bytes (memory or file) -> preprocess ->
        empty-body policy -> decode -> Result

    A serializer kind only supplies its decode step, the value standing
    for an allowed empty body, and whether a zero-length body counts as
    present. Instances hold no mutable state and can be shared.
    """

    def __init__(
        self,
        decode: DecodeFn,
        empty_value: EmptyFn,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
        require_content: bool = False,
        logger_name: str = "core.serializers",
    ) -> None:
        self._decode = decode
        self._empty_value = empty_value
        self._policy = policy or EmptyBodyPolicy()
        self._preprocessor = preprocessor or PassthroughPreprocessor()
        self._require_content = require_content
        self._logger = logging.getLogger(logger_name)

    @property
    def policy(self) -> EmptyBodyPolicy:
        return self._policy

    @property
    def preprocessor(self) -> DataPreprocessor:
        return self._preprocessor

    def run(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[T]:
        if data is not None:
            data = self._preprocessor.preprocess(data)

        if not self._is_present(data):
            if self._policy.allows(response, len(data or b"")):
                try:
                    return Result.success(self._empty_value())
                except ResponseSerializationError as ex:
                    return self._fail(request, response, ex)
            return self._fail(request, response, self._missing_data(data, error))

        try:
            value = self._decode(data, response)
        except ResponseSerializationError as ex:
            return self._fail(request, response, ex)

        # A usable body wins over an upstream error reported alongside it.
        if error is not None:
            self._logger.debug(f"Ignoring upstream error, body is usable: {error!r}")

        return Result.success(value)

    def run_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[T]:
        if file is None:
            return self._fail(
                request,
                response,
                ResponseSerializationError(FailureKind.input_file_nil, error),
            )

        try:
            data = read_body(file)
        except OSError as ex:
            return self._fail(
                request,
                response,
                ResponseSerializationError(
                    FailureKind.input_file_read_failed, ex, path=Path(file)
                ),
            )

        return self.run(request, response, data, error)

    def _is_present(self, data: bytes | None) -> bool:
        if data is None:
            return False
        return len(data) > 0 or not self._require_content

    def _missing_data(
        self,
        data: bytes | None,
        error: BaseException | None,
    ) -> ResponseSerializationError:
        if not self._require_content or (data is None and error is not None):
            kind = FailureKind.input_data_nil
        else:
            kind = FailureKind.input_data_nil_or_zero_length
        return ResponseSerializationError(kind, error)

    def _fail(
        self,
        request: Any | None,
        response: Response | None,
        error: ResponseSerializationError,
    ) -> Result[T]:
        status = None if response is None else response.status_code
        self._logger.debug(
            f"Serialization failed ({error.kind}) for request={request!r} status={status}",
            exc_info=error.underlying,
        )
        return Result.failure(error)
