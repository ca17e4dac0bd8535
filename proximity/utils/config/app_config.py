from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from proximity.exceptions import ConfigurationError
from proximity.utils.config.formatting_config import FormattingConfig


class AppConfig(BaseModel):
    """
    Хранит конфигурацию приложения.
    """
    log_level: str = "WARNING"
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    @field_validator('log_level', mode='before')
    @classmethod
    def check_is_logging_level(cls, v: Any) -> str:
        if isinstance(v, str) and isinstance(logging.getLevelName(v.upper()), int):
            return v.upper()

        else:
            raise PydanticCustomError(
                'log_level_validation_error',
                '{level} not a valid logging level!',
                {'level': v},
            )

    @classmethod
    def from_toml(cls, path: Path) -> AppConfig:
        """
        Загружает конфигурацию из TOML файла.

        :param path: Путь до файла конфигурации.
        :return: Конфигурация приложения.
        :raise ConfigurationError: Файл не найден или не является корректным TOML.
        :raise ValidationError: Значения в файле не соответствуют формату.
        """
        try:
            with open(path, mode="rb") as f:
                config_data: dict[str, Any] = tomllib.load(f)

        except OSError as err:
            raise ConfigurationError(path, str(err)) from err

        except tomllib.TOMLDecodeError as err:
            raise ConfigurationError(path, f"invalid TOML ({err})") from err

        return cls(**config_data)
