from .app_config import AppConfig
from .formatting_config import FormattingConfig

__all__ = (
    "AppConfig",
    "FormattingConfig",
)
