from pydantic import BaseModel, Field


class FormattingConfig(BaseModel):
    """
    Описывает параметры вывода чисел пользователю.
    """
    max_fraction_digits: int | None = Field(
        default=None, ge=1, le=17,
        description="Количество цифр после точки, по умолчанию кратчайшая точная запись"
    )
