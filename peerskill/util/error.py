"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings the service refuses to start with."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"{setting}: {reason}")
