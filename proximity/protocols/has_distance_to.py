from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class HasDistanceTo(Protocol[T_contra]):
    """
    Объект, для которого определено расстояние до другого объекта.
    """

    def distance(self, other: T_contra) -> float:
        """
        Находит расстояние до другого объекта.

        :param other: Объект, до которого ищем расстояние.
        :return: Расстояние между объектами.
        """
