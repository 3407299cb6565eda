from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from reserial.bootstrap.config.loader import get_configfile
from reserial.core.encoding import DEFAULT_ENCODING, normalize_encoding
from reserial.core.policy import DEFAULT_EMPTY_RESPONSE_CODES


class ReserialConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RESERIAL_",
        extra="allow"
    )

    empty_response_codes: Annotated[
        list[int],
        Field(
            description=(
                "HTTP status codes for which a missing or zero-length body is\n"
                "a valid response rather than an error.\n"
                "Defaults to 204 (No Content) and 205 (Reset Content)."
            ),
            default_factory=lambda: sorted(DEFAULT_EMPTY_RESPONSE_CODES)
        )
    ]

    default_encoding: Annotated[
        str,
        Field(
            description=(
                "Text encoding used by the string serializer when neither an\n"
                "explicit encoding nor a Content-Type charset is available."
            ),
            default=DEFAULT_ENCODING
        )
    ]

    strip_xssi_prefix: Annotated[
        bool,
        Field(
            description=(
                "Strip the \")]}',\" anti-hijacking prefix from bodies before\n"
                "they are decoded."
            ),
            default=False
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description=(
                "Level applied by `configure_logging()`. Classified\n"
                "serialization failures are logged at DEBUG."
            ),
            default="INFO"
        )
    ]

    @field_validator("empty_response_codes")
    @classmethod
    def validate_status_codes(cls, v: list[int]) -> list[int]:
        for code in v:
            if not 100 <= code <= 599:
                raise ValueError(f"{code} is not an HTTP status code.")
        return v

    @field_validator("default_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        canonical = normalize_encoding(v)
        if canonical is None:
            raise ValueError(f"Unknown text encoding {v!r}.")
        return canonical

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings]
        configfile = get_configfile()
        if configfile is not None:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=configfile))
        return tuple(sources)
