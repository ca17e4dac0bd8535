from typing import Any


class InvalidPointFormat(ValueError):
    """
    Представляет ошибку разбора текстового представления точки.
    """
    def __init__(self, text: Any, reason: str):
        self.text: Any = text
        self.reason: str = reason
        super().__init__(f"Invalid point format {text!r}: {reason}")
