from .configuration_error import ConfigurationError
from .invalid_point_format import InvalidPointFormat

__all__ = (
    "ConfigurationError",
    "InvalidPointFormat",
)
