from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Ordered(Protocol):
    """
    Объект, поддерживающий трехзначное сравнение с другим объектом того же вида.
    """

    def compare_to(self, other: Any) -> int:
        """
        Сравнивает текущий объект с другим.

        :param other: Объект для сравнения.
        :return: -1, если текущий объект меньше, 1, если больше, иначе 0.
        """
