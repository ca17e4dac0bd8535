from .point2d_dto import Point2DDTO

__all__ = (
    "Point2DDTO",
)
