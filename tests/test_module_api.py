"""
Tests for the module-level functions backed by the shared store.
"""

import pytest

import confmap
from conftest import EXAMPLE_CONFIG, write_config


class TestDefaultStore:

    def test_example_usage(self, tmp_path, example_file):
        confmap.add_config_path(str(tmp_path))
        confmap.set_config_name("config.json")
        confmap.read_config()

        assert confmap.get_string("testGetString") == "YesMan"
        assert confmap.get_int64("testGetInt64") == 43
        assert confmap.get_string_array("testGetStringArray") == ["+44 1234567", "+44 2345678"]
        assert confmap.keys() == list(EXAMPLE_CONFIG)

    def test_getters_before_read(self):
        assert not confmap.is_loaded()
        assert confmap.get_string("testGetString") is None
        assert confmap.get_bool("anything") is None
        assert confmap.get_string_array("anything") is None

    def test_missing_file_then_getters(self, tmp_path):
        confmap.add_config_path(str(tmp_path))
        confmap.set_config_name("does_not_exist.json")

        with pytest.raises(confmap.ConfigFileNotFoundError):
            confmap.read_config()

        assert confmap.get_string("testGetString") is None
        assert confmap.get_int64("testGetInt64") is None

    def test_functions_share_one_store(self, tmp_path):
        write_config(tmp_path, {"flag": True})
        confmap.add_config_path(tmp_path)
        confmap.set_config_name("config.json")
        confmap.read_config()

        assert confmap.default_store.get_bool("flag") is True
        assert confmap.has("flag")
        assert confmap.get_path("flag") is True

    def test_store_satisfies_reader_interface(self):
        assert isinstance(confmap.default_store, confmap.IConfigReader)


class Consumer:
    """Component that only needs lookups."""

    def __init__(self, config: confmap.IConfigReader):
        self.greeting = config.get_string("greeting") or "hello"


class TestInjection:

    def test_injected_store(self, tmp_path):
        write_config(tmp_path, {"greeting": "hi"})
        store = confmap.ConfigStore.from_file(tmp_path / "config.json")

        assert Consumer(store).greeting == "hi"
        # shared store untouched
        assert not confmap.is_loaded()

    def test_fallback_value_on_mismatch(self, tmp_path):
        write_config(tmp_path, {"greeting": 5})
        store = confmap.ConfigStore.from_file(tmp_path / "config.json")

        assert Consumer(store).greeting == "hello"
