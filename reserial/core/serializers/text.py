from os import PathLike
from typing import Any

from reserial.core.encoding import DEFAULT_ENCODING, EncodingResolver
from reserial.core.errors import FailureKind, ResponseSerializationError
from reserial.core.models.response import Response
from reserial.core.models.result import Result
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.ports.serializer import ResponseSerializer
from reserial.core.serializers.pipeline import SerializationPipeline


class StringResponseSerializer(ResponseSerializer[str]):
    """
    Decodes the response body to text.

    The encoding is the one given at construction if any, otherwise the
    charset of the response Content-Type header, otherwise `fallback`.
    Empty bodies decode to "" without consulting the encoding.
    """

    def __init__(
        self,
        encoding: str | None = None,
        *,
        fallback: str = DEFAULT_ENCODING,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        self._resolver = EncodingResolver(explicit=encoding, fallback=fallback)
        self._pipeline = SerializationPipeline(
            decode=self._decode,
            empty_value=lambda: "",
            policy=policy,
            preprocessor=preprocessor,
            logger_name="core.serializers.string",
        )

    @property
    def encoding(self) -> str | None:
        return self._resolver.explicit

    def _decode(self, data: bytes, response: Response | None) -> str:
        if not data:
            return ""

        encoding = self._resolver.resolve(response)
        try:
            return data.decode(encoding)
        except UnicodeError as ex:
            raise ResponseSerializationError(
                FailureKind.string_serialization_failed, ex, encoding=encoding
            ) from ex

    def serialize(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[str]:
        return self._pipeline.run(request, response, data, error)

    def serialize_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[str]:
        return self._pipeline.run_download(request, response, file, error)
