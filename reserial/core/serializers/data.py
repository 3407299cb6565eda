from os import PathLike
from typing import Any

from reserial.core.models.response import Response
from reserial.core.models.result import Result
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.ports.serializer import ResponseSerializer
from reserial.core.serializers.pipeline import SerializationPipeline


class DataResponseSerializer(ResponseSerializer[bytes]):
    """
    Returns the response body as raw bytes.

    Any body that is present, including a zero-length one, is returned
    unchanged. A missing body is only accepted when the empty-body
    policy allows it, in which case the value is `b""`.
    """

    def __init__(
        self,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        self._pipeline = SerializationPipeline(
            decode=lambda data, _: bytes(data),
            empty_value=lambda: b"",
            policy=policy,
            preprocessor=preprocessor,
            logger_name="core.serializers.data",
        )

    def serialize(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[bytes]:
        return self._pipeline.run(request, response, data, error)

    def serialize_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[bytes]:
        return self._pipeline.run_download(request, response, file, error)
