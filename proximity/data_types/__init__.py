from .point2d import Point2D

__all__ = (
    "Point2D",
)
