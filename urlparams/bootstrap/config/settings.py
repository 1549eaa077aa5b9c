from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from urlparams.bootstrap.config.loader import get_configfile
from urlparams.core.models.config import SerializerConfig, SpaceEncoding


class UrlParamsSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="URLPARAMS_",
        extra="ignore"
    )

    space: Annotated[
        SpaceEncoding,
        Field(
            description=(
                "Escape used for a space inside a value.\n"
                "'plus' writes '+' (form encoding), 'percent' writes '%20'.\n"
                "Both are decoded back to a space by standard query parsers."
            ),
            default=SpaceEncoding.plus
        )
    ]

    encode_keys: Annotated[
        bool,
        Field(
            description=(
                "Percent-encode keys with the same rules as values.\n"
                "Keys are field names and are written verbatim by default."
            ),
            default=False
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity of the command line tool.",
            default="INFO"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=get_configfile()),
        )

    def to_serializer_config(self) -> SerializerConfig:
        return SerializerConfig(
            space=self.space,
            encode_keys=self.encode_keys
        )
