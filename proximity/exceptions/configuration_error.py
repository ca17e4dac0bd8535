from pathlib import Path


class ConfigurationError(RuntimeError):
    """
    Представляет ошибку чтения файла конфигурации.
    """
    def __init__(self, path: Path, reason: str):
        self.path: Path = path
        self.reason: str = reason
        super().__init__(f"Can't load configuration from {path}: {reason}")
