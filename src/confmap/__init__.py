"""
confmap - read a JSON config file into an in-memory map.

Put a JSON file next to your program (or anywhere else):

    config.json
    {
        "testGetString": "YesMan",
        "testGetInt64": 43,
        "testGetStringArray": ["+44 1234567", "+44 2345678"]
    }

and read it once at startup:

    import confmap

    confmap.add_config_path(path_str)
    confmap.set_config_name("config.json")
    confmap.read_config()

    confmap.get_string("testGetString")          # "YesMan"
    confmap.get_int64("testGetInt64")            # 43
    confmap.get_string_array("testGetStringArray")

The module-level functions act on one shared ConfigStore. Applications
that prefer to pass the store around can build their own ConfigStore.
"""

import logging

from confmap.core.config_store import ConfigStore
from confmap.errors import ConfigError, ConfigFileNotFoundError, ConfigParseError
from confmap.interfaces.config_reader import IConfigReader

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Global instance for easy access
default_store = ConfigStore()

add_config_path = default_store.add_config_path
set_config_name = default_store.set_config_name
read_config = default_store.read_config
reset = default_store.reset
is_loaded = default_store.is_loaded
keys = default_store.keys
has = default_store.has
snapshot = default_store.snapshot

get = default_store.get
get_path = default_store.get_path
get_string = default_store.get_string
get_bool = default_store.get_bool
get_int64 = default_store.get_int64
get_int32 = default_store.get_int32
get_int16 = default_store.get_int16
get_int8 = default_store.get_int8
get_float64 = default_store.get_float64
get_float32 = default_store.get_float32
get_string_array = default_store.get_string_array
get_int64_array = default_store.get_int64_array
get_float64_array = default_store.get_float64_array
get_array = default_store.get_array
get_map = default_store.get_map
get_map_array = default_store.get_map_array

__all__ = [
    "ConfigStore",
    "IConfigReader",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "default_store",
    "add_config_path",
    "set_config_name",
    "read_config",
    "reset",
    "is_loaded",
    "keys",
    "has",
    "snapshot",
    "get",
    "get_path",
    "get_string",
    "get_bool",
    "get_int64",
    "get_int32",
    "get_int16",
    "get_int8",
    "get_float64",
    "get_float32",
    "get_string_array",
    "get_int64_array",
    "get_float64_array",
    "get_array",
    "get_map",
    "get_map_array",
]
