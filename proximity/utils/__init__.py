from .number_formatting import format_for_editing

__all__ = (
    "format_for_editing",
)
