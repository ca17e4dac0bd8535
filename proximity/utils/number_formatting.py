import math
import numbers
from decimal import Decimal

NAN_TEXT: str = "NaN"
POSITIVE_INFINITY_TEXT: str = "Infinity"
NEGATIVE_INFINITY_TEXT: str = "-Infinity"


def format_for_editing(value: float, max_fraction_digits: int | None = None) -> str:
    """
    Преобразует число в текст, пригодный для отображения и редактирования пользователем.

    Число всегда выводится в позиционной записи (без экспоненты), незначащие нули
    дробной части отбрасываются, но хотя бы одна цифра после точки сохраняется.
    Без ограничения точности выбирается кратчайшая запись, которая при разборе
    через float() возвращает то же самое значение.

    :param value: Число для форматирования.
    :param max_fraction_digits: Максимальное количество цифр после точки
        или None для кратчайшей точной записи.
    :return: Текстовое представление числа.
    :raise TypeError: Если значение не является вещественным числом.
    :raise ValueError: Если max_fraction_digits меньше 1.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected real number for formatting, got {type(value).__name__}")

    value = float(value)
    if math.isnan(value):
        return NAN_TEXT

    if math.isinf(value):
        return POSITIVE_INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT

    if max_fraction_digits is not None:
        if max_fraction_digits < 1:
            raise ValueError(f"max_fraction_digits must be at least 1 (got {max_fraction_digits=})")

        value = round(value, max_fraction_digits)

    # repr дает кратчайшую запись, однозначно восстанавливаемую в тот же double
    text: str = format(Decimal(repr(value)), "f")
    if "." not in text:
        return f"{text}.0"

    text = text.rstrip("0")
    if text.endswith("."):
        text += "0"

    return text
