from pathlib import Path

import pytest
from pydantic import ValidationError

from proximity.exceptions import ConfigurationError
from proximity.utils.config import AppConfig, FormattingConfig


def test_default_config():
    config = AppConfig()

    assert config.log_level == "WARNING"
    assert config.formatting == FormattingConfig(max_fraction_digits=None)


def test_load_config_from_toml(tmp_path: Path):
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        'log_level = "debug"\n'
        '\n'
        '[formatting]\n'
        'max_fraction_digits = 3\n',
        encoding="UTF8"
    )

    config = AppConfig.from_toml(config_path)

    assert config.log_level == "DEBUG"
    assert config.formatting.max_fraction_digits == 3


def test_example_config_is_valid():
    example_path = Path(__file__).parent.parent.parent / "config.example.toml"

    config = AppConfig.from_toml(example_path)

    assert config.formatting.max_fraction_digits == 6


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        AppConfig(log_level="LOUD")


def test_invalid_fraction_digits():
    with pytest.raises(ValidationError):
        FormattingConfig(max_fraction_digits=0)

    with pytest.raises(ValidationError):
        FormattingConfig(max_fraction_digits=18)


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(ConfigurationError) as exc_info:
        AppConfig.from_toml(tmp_path / "missing.toml")

    assert exc_info.value.path == tmp_path / "missing.toml"


def test_malformed_config_file(tmp_path: Path):
    config_path = tmp_path / "config.toml"
    config_path.write_text("log_level = ", encoding="UTF8")

    with pytest.raises(ConfigurationError):
        AppConfig.from_toml(config_path)
