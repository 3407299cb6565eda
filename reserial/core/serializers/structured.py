from os import PathLike
from typing import Any

from reserial.core.errors import ResponseSerializationError
from reserial.core.models.empty import NULL
from reserial.core.models.response import Response
from reserial.core.models.result import Result
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.decoder import Decoder
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.ports.serializer import ResponseSerializer
from reserial.core.serializers.pipeline import SerializationPipeline
from reserial.infra.json_decoder import JSONDecoder
from reserial.infra.msgpack_decoder import MsgPackDecoder
from reserial.infra.plist_decoder import PropertyListDecoder


def parse_document(decoder: Decoder, data: bytes) -> Any:
    """
    Run `decoder` on `data`, translating the parser's own exceptions
    into the failure kind the decoder declares.
    """
    try:
        return decoder.deserialize(data)
    except decoder.errors as ex:
        raise ResponseSerializationError(decoder.failure_kind, ex) from ex


class StructuredResponseSerializer(ResponseSerializer[Any]):
    """
    Parses the response body as a structured document into generic
    values (dicts, lists, strings, numbers, ...).

    A zero-length body is never a valid document: it is only accepted
    when the empty-body policy allows it, and then yields NULL.
    """

    def __init__(
        self,
        decoder: Decoder,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        self._decoder = decoder
        self._pipeline = SerializationPipeline(
            decode=lambda data, _: parse_document(self._decoder, data),
            empty_value=lambda: NULL,
            policy=policy,
            preprocessor=preprocessor,
            require_content=True,
            logger_name=f"core.serializers.{type(decoder).__name__}",
        )

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    def serialize(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[Any]:
        return self._pipeline.run(request, response, data, error)

    def serialize_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[Any]:
        return self._pipeline.run_download(request, response, file, error)


class JSONResponseSerializer(StructuredResponseSerializer):
    def __init__(
        self,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        super().__init__(JSONDecoder(), policy=policy, preprocessor=preprocessor)


class PropertyListResponseSerializer(StructuredResponseSerializer):
    def __init__(
        self,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        super().__init__(PropertyListDecoder(), policy=policy, preprocessor=preprocessor)


class MsgPackResponseSerializer(StructuredResponseSerializer):
    def __init__(
        self,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        super().__init__(MsgPackDecoder(), policy=policy, preprocessor=preprocessor)
