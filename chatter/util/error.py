"""Errors shared by every layer."""


class ConfigurationError(Exception):
    """A required setting is missing or unusable.

    Attributes:
        setting: Environment variable name of the setting, e.g. "DATABASE__URL"
    """

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(f"{message} ({setting})")
