from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from proximity.exceptions import InvalidPointFormat
from proximity.utils.number_formatting import format_for_editing

logger = logging.getLogger(__name__)

COORDINATES_SEPARATOR: str = ", "


@dataclass(frozen=True, slots=True, eq=False)
class Point2D:
    """
    Неизменяемая точка в двухмерном пространстве.

    Равенство точное, без допуска на погрешность, а упорядочивание
    лексикографическое: сначала по x, затем по y.

    Сравнение через compare_to не обрабатывает NaN отдельно: при NaN в любой из
    координат проверки < и > ложны, и результатом становится 0, хотя == для тех
    же точек возвращает False. Отсортированные контейнеры полагаются на такое
    поведение, поэтому оно сохраняется как есть.
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        # Целые координаты приводятся к float, NaN и inf остаются как есть
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            # Кортеж (x, y) тоже не считается равным точке
            return False

        return self.x == other.x and self.y == other.y

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented

        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented

        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented

        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented

        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return COORDINATES_SEPARATOR.join(
            (format_for_editing(self.x), format_for_editing(self.y))
        )

    def compare_to(self, other: Point2D) -> int:
        """
        Сравнивает точки лексикографически: сначала по x, затем по y.

        :param other: Точка для сравнения.
        :return: -1, если текущая точка меньше, 1, если больше, иначе 0.
        :raise TypeError: Если передана не точка.
        """
        if not isinstance(other, Point2D):
            raise TypeError(f"Can't compare Point2D with {type(other).__name__}")

        if self.x < other.x:
            return -1

        if self.x > other.x:
            return 1

        if self.y < other.y:
            return -1

        if self.y > other.y:
            return 1

        return 0

    def distance(self, other: Point2D) -> float:
        """
        Находит евклидово расстояние до другой точки.

        :param other: Точка, до которой ищем расстояние.
        :return: Расстояние до точки, NaN при NaN в координатах или inf при переполнении.
        """
        dx: float = other.x - self.x
        dy: float = other.y - self.y
        # Умножение вместо ** 2: при переполнении получаем inf, а не OverflowError
        return math.sqrt(dx * dx + dy * dy)

    @classmethod
    def from_string(cls, text: str) -> Point2D:
        """
        Создает точку из текста вида "x, y", обратного результату str().

        :param text: Текстовое представление точки.
        :return: Новая точка.
        :raise InvalidPointFormat: Если текст не содержит ровно две числовые координаты через запятую.
        """
        if not isinstance(text, str):
            logger.debug("Refusing to parse point from %s", type(text).__name__)
            raise InvalidPointFormat(text, "expected string")

        parts: list[str] = text.split(",")
        if len(parts) != 2:
            logger.debug("Point text %r has %d comma separated parts", text, len(parts))
            raise InvalidPointFormat(text, "expected exactly two comma separated coordinates")

        try:
            x, y = (float(part.strip()) for part in parts)

        except ValueError as err:
            logger.debug("Point text %r has non numeric coordinate", text)
            raise InvalidPointFormat(text, "coordinates must be numbers") from err

        return cls(x, y)
