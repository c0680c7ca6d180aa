import copy
import json
import logging
import sys
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from confmap.core import values
from confmap.errors import ConfigFileNotFoundError, ConfigParseError
from confmap.interfaces.config_reader import IConfigReader

logger = logging.getLogger(__name__)

_MISSING = object()


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


def _fallback_dir() -> Path:
    """Directory of the running program, or the working directory if unknown."""
    program = sys.argv[0] if sys.argv else ""
    if program:
        return Path(program).resolve().parent
    return Path.cwd()


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        raise ConfigFileNotFoundError(path, e.strerror or str(e)) from e


class ConfigStore(IConfigReader):
    """
    Holds one JSON config file loaded into memory.

    Lifecycle: set the directory with add_config_path() and the file name
    with set_config_name(), then call read_config(). Getters read from the
    map produced by the last successful read_config() and return None for
    missing keys, type mismatches, or before anything was loaded.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None,
                 name: Optional[str] = None, search_fallback: bool = True):
        self.config_path: Optional[Path] = Path(path) if path is not None else None
        self.config_name: Optional[str] = name
        self.search_fallback = search_fallback
        self._data: Optional[Dict[str, Any]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, file_path: Union[str, Path], search_fallback: bool = False) -> "ConfigStore":
        """Build a store pointing at ``file_path`` and load it."""
        file_path = Path(file_path)
        store = cls(file_path.parent, file_path.name, search_fallback=search_fallback)
        store.read_config()
        return store

    # ==================== Configuration ====================

    def add_config_path(self, path: Union[str, Path]) -> None:
        """Set the directory the config file lives in. Not validated."""
        self.config_path = Path(path)

    def set_config_name(self, name: str) -> None:
        """Set the config file name, extension included."""
        self.config_name = name

    @property
    def file_path(self) -> Optional[Path]:
        if not self.config_name:
            return None
        if self.config_path is None:
            return Path(self.config_name)
        return self.config_path / self.config_name

    def read_config(self) -> None:
        """
        Read and parse the config file, replacing any previously loaded map.

        Raises:
            ConfigFileNotFoundError: path and name do not point at a readable file
            ConfigParseError: the file is not a UTF-8 JSON document with an object at top level
        """
        try:
            path, found_in = self._resolve()
            data = self._load(path)
        except (ConfigFileNotFoundError, ConfigParseError) as e:
            with self._lock:
                self._data = None
            logger.warning("Failed to load config: %s", e)
            raise

        with self._lock:
            if found_in is not None:
                self.config_path = found_in
            self._data = data
        logger.debug("Loaded %d keys from %s", len(data), path)

    def reset(self) -> None:
        """Forget path, name and loaded values."""
        with self._lock:
            self.config_path = None
            self.config_name = None
            self._data = None

    def _resolve(self) -> Tuple[Path, Optional[Path]]:
        """Return the file to read and, if it came from the fallback search, its directory."""
        primary = self.file_path
        if primary is None:
            raise ConfigFileNotFoundError(None, "config name is not set")
        if _is_file(primary) or not self.search_fallback:
            return primary, None

        fallback_dir = _fallback_dir()
        candidate = fallback_dir / self.config_name
        if _is_file(candidate):
            logger.info("Config file %s found in %s", self.config_name, fallback_dir)
            return candidate, fallback_dir
        return primary, None

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        logger.debug("Reading config file %s", path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(path) from e
        except IsADirectoryError as e:
            raise ConfigFileNotFoundError(path, "is a directory") from e
        except PermissionError as e:
            raise ConfigFileNotFoundError(path, "permission denied") from e
        except OSError as e:
            raise ConfigFileNotFoundError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(path, f"invalid UTF-8: {e.reason}") from e

        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ConfigParseError(path, e.msg, e.lineno, e.colno) from e
        except ValueError as e:
            raise ConfigParseError(path, str(e)) from e
        except RecursionError as e:
            raise ConfigParseError(path, "document nested too deeply") from e

        if not isinstance(parsed, dict):
            raise ConfigParseError(path, f"top-level value must be an object, got {type(parsed).__name__}")
        return parsed

    # ==================== Introspection ====================

    def is_loaded(self) -> bool:
        return self._data is not None

    def keys(self) -> List[str]:
        data = self._data
        return list(data) if data is not None else []

    def has(self, key: str) -> bool:
        data = self._data
        return data is not None and key in data

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only copy of the loaded map (empty before a successful load)."""
        data = self._data
        return MappingProxyType(copy.deepcopy(data) if data is not None else {})

    # ==================== Lookups ====================

    def _lookup(self, key: str) -> Any:
        data = self._data
        if data is None:
            return _MISSING
        return data.get(key, _MISSING)

    def get(self, key: str) -> Optional[Any]:
        value = self._lookup(key)
        return None if value is _MISSING else copy.deepcopy(value)

    def get_path(self, key_path: str, default: Any = None, sep: str = ".") -> Any:
        """Retrieves nested values using dot notation (e.g., 'llm.model')"""
        value: Any = self._data
        if value is None:
            return default
        for k in key_path.split(sep):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return copy.deepcopy(value)

    def get_string(self, key: str) -> Optional[str]:
        return values.as_string(self._lookup(key))

    def get_bool(self, key: str) -> Optional[bool]:
        return values.as_bool(self._lookup(key))

    def get_int64(self, key: str) -> Optional[int]:
        return values.as_int(self._lookup(key), values.INT64_RANGE)

    def get_int32(self, key: str) -> Optional[int]:
        return values.as_int(self._lookup(key), values.INT32_RANGE)

    def get_int16(self, key: str) -> Optional[int]:
        return values.as_int(self._lookup(key), values.INT16_RANGE)

    def get_int8(self, key: str) -> Optional[int]:
        return values.as_int(self._lookup(key), values.INT8_RANGE)

    def get_float64(self, key: str) -> Optional[float]:
        return values.as_float64(self._lookup(key))

    def get_float32(self, key: str) -> Optional[float]:
        return values.as_float32(self._lookup(key))

    def get_string_array(self, key: str) -> Optional[List[str]]:
        return values.as_array_of(self._lookup(key), values.as_string)

    def get_int64_array(self, key: str) -> Optional[List[int]]:
        return values.as_array_of(self._lookup(key), values.as_int)

    def get_float64_array(self, key: str) -> Optional[List[float]]:
        return values.as_array_of(self._lookup(key), values.as_float64)

    def get_array(self, key: str) -> Optional[List[Any]]:
        return values.as_array(self._lookup(key))

    def get_map(self, key: str) -> Optional[Dict[str, Any]]:
        return values.as_map(self._lookup(key))

    def get_map_array(self, key: str) -> Optional[List[Dict[str, Any]]]:
        return values.as_array_of(self._lookup(key), values.as_map)
