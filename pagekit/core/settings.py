# pagekit/core/settings.py
"""
Application settings, built with pydantic-settings.

Values come from, in decreasing precedence:

1. keyword arguments given to ``Settings(...)``;
2. environment variables ``PAGEKIT__<SECTION>__<KEY>`` (``PAGEKIT__HLJS__THEME=dracula``);
3. the YAML file named by ``PAGEKIT_SETTINGS``, else ``config/settings.yaml``:

    hljs:
      library: common
      theme: zenburn
      tabsize: 8

Each section is a nested model that validates its own values.
"""
import os
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from plugins.core_hljs.config import HljsSettings

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "PAGEKIT_SETTINGS"
DEFAULT_SETTINGS_PATH = Path("config") / "settings.yaml"


class LoggingSettings(BaseModel):
    # Root logger level; None keeps the level of logging_config.yaml.
    level: Optional[str] = None

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Optional[str]:
        return str(v).strip().upper() if v else None


class Settings(BaseSettings):
    """Settings of the whole application, one field per section."""
    model_config = SettingsConfigDict(
        env_prefix="PAGEKIT__",
        env_nested_delimiter="__",
        yaml_file=DEFAULT_SETTINGS_PATH,
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    hljs: HljsSettings = Field(default_factory=HljsSettings)

    @field_validator('logging', 'hljs', mode='before')
    @classmethod
    def empty_section(cls, v: Any) -> Any:
        # "hljs:" with nothing below it is an empty section, not an error
        return {} if v is None else v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))


def settings_path(path: Optional[Union[str, Path]] = None) -> Path:
    """The settings file: argument, else $PAGEKIT_SETTINGS, else config/settings.yaml."""
    if path is None:
        path = os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_PATH
    return Path(path)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load the settings file with environment overrides applied on top."""
    yaml_file = settings_path(path)
    if not yaml_file.is_file():
        logger.debug(f"Settings file '{yaml_file}' not found, using defaults.")

    class FileSettings(Settings):
        model_config = SettingsConfigDict(yaml_file=yaml_file)

    return FileSettings()
