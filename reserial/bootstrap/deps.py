import json
from functools import lru_cache

from pydantic import ValidationError

from reserial.bootstrap.config.settings import ReserialConfig
from reserial.core.helpers.utils import setup_logging
from reserial.core.policy import EmptyBodyPolicy
from reserial.core.ports.preprocessor import DataPreprocessor
from reserial.core.preprocess import PassthroughPreprocessor, XSSIPreprocessor
from reserial.core.serializers.data import DataResponseSerializer
from reserial.core.serializers.decodable import DecodableResponseSerializer, DocumentFormat
from reserial.core.serializers.structured import (
    JSONResponseSerializer,
    MsgPackResponseSerializer,
    PropertyListResponseSerializer,
)
from reserial.core.serializers.text import StringResponseSerializer


@lru_cache
def get_config() -> ReserialConfig:
    try:
        return ReserialConfig()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def configure_logging() -> None:
    setup_logging(get_config().log_level)


@lru_cache
def get_policy() -> EmptyBodyPolicy:
    config = get_config()
    return EmptyBodyPolicy(frozenset(config.empty_response_codes))


@lru_cache
def get_preprocessor() -> DataPreprocessor:
    config = get_config()
    if config.strip_xssi_prefix:
        return XSSIPreprocessor()
    return PassthroughPreprocessor()


@lru_cache
def get_data_serializer() -> DataResponseSerializer:
    return DataResponseSerializer(
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )


@lru_cache
def get_string_serializer(encoding: str | None = None) -> StringResponseSerializer:
    config = get_config()
    return StringResponseSerializer(
        encoding,
        fallback=config.default_encoding,
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )


@lru_cache
def get_json_serializer() -> JSONResponseSerializer:
    return JSONResponseSerializer(
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )


@lru_cache
def get_property_list_serializer() -> PropertyListResponseSerializer:
    return PropertyListResponseSerializer(
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )


@lru_cache
def get_msgpack_serializer() -> MsgPackResponseSerializer:
    return MsgPackResponseSerializer(
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )


def get_decodable_serializer(
    target: type,
    format: DocumentFormat = DocumentFormat.json,
) -> DecodableResponseSerializer:
    return DecodableResponseSerializer(
        target,
        format,
        policy=get_policy(),
        preprocessor=get_preprocessor()
    )
