from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from proximity.data_types import Point2D


class Point2DDTO(BaseModel):
    """
    Описывает точку для передачи и сериализации.

    :param x: Координата X.
    :param y: Координата Y.
    """
    x: float
    y: float

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        allow_inf_nan=True,
        ser_json_inf_nan="constants"
    ) # noqa: overriding defaults to have it hashable

    @classmethod
    def from_point(cls, point: Point2D) -> Point2DDTO:
        """
        Создает объект передачи данных из точки.

        :param point: Исходная точка.
        :return: Объект с координатами точки.
        """
        return cls(x=point.x, y=point.y)

    def to_point(self) -> Point2D:
        """
        Преобразует объект передачи данных в точку.

        :return: Новая точка.
        """
        return Point2D(self.x, self.y)
