from proximity.data_types import Point2D
from proximity.dto import Point2DDTO
from proximity.protocols import HasDistanceTo, Ordered
from proximity.utils.number_formatting import format_for_editing

__version__ = "1.0.0"

__all__ = (
    "Point2D",
    "Point2DDTO",
    "HasDistanceTo",
    "Ordered",
    "format_for_editing",
)
