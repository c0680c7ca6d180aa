"""Exceptions raised while loading a configuration file."""

from pathlib import Path
from typing import Optional, Union


class ConfigError(Exception):
    """Base class for all confmap errors."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """The configured path and name do not resolve to a readable file."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str = "file not found"):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        super().__init__(f"Config file not found: {path} ({reason})")

    def __str__(self) -> str:
        return f"Config file not found: {self.path} ({self.reason})"


class ConfigParseError(ConfigError, ValueError):
    """The config file exists but its contents are not a JSON object."""

    def __init__(self, path: Union[str, Path], msg: str,
                 lineno: Optional[int] = None, colno: Optional[int] = None):
        self.path = Path(path)
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" (line {self.lineno}, column {self.colno})" if self.lineno is not None else ""
        return f"Failed to parse config file {self.path}: {self.msg}{where}"
