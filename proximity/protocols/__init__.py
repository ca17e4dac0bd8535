from .has_distance_to import HasDistanceTo
from .ordered import Ordered

__all__ = (
    "HasDistanceTo",
    "Ordered",
)
