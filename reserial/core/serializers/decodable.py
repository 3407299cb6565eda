from enum import StrEnum
from os import PathLike
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from reserial.core.errors import FailureKind, ResponseSerializationError
from reserial.core.models.response import Response
from reserial.core.models.result import Result
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.decoder import Decoder
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.ports.serializer import ResponseSerializer
from reserial.core.serializers.pipeline import SerializationPipeline
from reserial.core.serializers.structured import parse_document
from reserial.infra.json_decoder import JSONDecoder
from reserial.infra.msgpack_decoder import MsgPackDecoder
from reserial.infra.plist_decoder import PropertyListDecoder

T = TypeVar("T")


class DocumentFormat(StrEnum):
    json = "json"
    property_list = "property_list"
    msgpack = "msgpack"

    def decoder(self) -> Decoder:
        match self:
            case DocumentFormat.json:
                return JSONDecoder()
            case DocumentFormat.property_list:
                return PropertyListDecoder()
            case DocumentFormat.msgpack:
                return MsgPackDecoder()


class DecodableResponseSerializer(ResponseSerializer[T], Generic[T]):
    """
    Parses the response body and validates it into `target`.

    `target` is anything pydantic can validate into: a BaseModel, a
    dataclass, a TypedDict, a `list[Model]`, ... Two failure stages are
    kept apart:

    - the document does not parse: the format's own failure kind
      (e.g. `json_serialization_failed`), with the parser error attached;
    - the document parses but does not fit `target`: `decoding_failed`,
      with the pydantic ValidationError attached.

    When the empty-body policy accepts a missing body, the value is
    `target.empty_value()`. Targets that do not implement EmptyResponse
    must not be used with endpoints answering 204/205; doing so is
    reported as `invalid_empty_response`.
    """

    def __init__(
        self,
        target: type[T],
        format: DocumentFormat = DocumentFormat.json,
        *,
        policy: EmptyBodyPolicy | None = None,
        preprocessor: DataPreprocessor | None = None,
    ) -> None:
        self._target = target
        self._format = DocumentFormat(format)
        self._decoder = self._format.decoder()
        self._adapter = TypeAdapter(target)
        self._pipeline = SerializationPipeline(
            decode=self._decode,
            empty_value=self._empty,
            policy=policy,
            preprocessor=preprocessor,
            require_content=True,
            logger_name=f"core.serializers.decodable.{self._format}",
        )

    @property
    def target(self) -> type[T]:
        return self._target

    @property
    def format(self) -> DocumentFormat:
        return self._format

    def _decode(self, data: bytes, _: Response | None) -> T:
        document = parse_document(self._decoder, data)
        try:
            return self._adapter.validate_python(document)
        except ValidationError as ex:
            raise ResponseSerializationError(
                FailureKind.decoding_failed, ex, target=self._target
            ) from ex

    def _empty(self) -> T:
        # EmptyResponse is checked structurally: targets may be generic
        # aliases such as list[Model], which are not classes.
        empty_value = getattr(self._target, "empty_value", None)
        if not callable(empty_value):
            raise ResponseSerializationError(
                FailureKind.invalid_empty_response, target=self._target
            )
        return empty_value()

    def serialize(
        self,
        request: Any | None,
        response: Response | None,
        data: bytes | None,
        error: BaseException | None,
    ) -> Result[T]:
        return self._pipeline.run(request, response, data, error)

    def serialize_download(
        self,
        request: Any | None,
        response: Response | None,
        file: str | PathLike | None,
        error: BaseException | None,
    ) -> Result[T]:
        return self._pipeline.run_download(request, response, file, error)
