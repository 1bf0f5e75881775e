#!/usr/bin/env python3
"""
Tests for the properties, variables and global config loaders.
"""

import pytest
from unittest.mock import patch

from stellar_shell.config import loaders
from stellar_shell.config import (
    load_global_config,
    load_properties,
    load_variables,
    validate_options,
)
from stellar_shell.core import ConfigError


# ============================================================================
# Properties Tests
# ============================================================================

class TestLoadProperties:
    """Tests for load_properties()."""

    def test_key_value_forms(self, tmp_path):
        path = tmp_path / "stellar.properties"
        path.write_text(
            "# comment\n"
            "! also a comment\n"
            "\n"
            "zookeeper = node1:2181\n"
            "profiler.client.period.duration: 15\n"
            "flag\n"
        )
        assert load_properties(path) == {
            "zookeeper": "node1:2181",
            "profiler.client.period.duration": "15",
            "flag": "",
        }

    def test_escaped_separator_stays_in_key(self, tmp_path):
        path = tmp_path / "stellar.properties"
        path.write_text("a\\=b = c\n")
        assert load_properties(path) == {"a\\=b": "c"}

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "stellar.properties"
        path.write_bytes(b"a=\xff\n")
        with pytest.raises(ConfigError, match="Invalid properties file"):
            load_properties(path)

    def test_missing_default_file(self, tmp_path):
        with patch.object(loaders, "DEFAULT_PROPERTIES_FILE", tmp_path / "missing"):
            assert load_properties() == {}

    def test_default_file_used(self, tmp_path):
        default = tmp_path / "stellar.properties"
        default.write_text("x=1\n")
        with patch.object(loaders, "DEFAULT_PROPERTIES_FILE", default):
            assert load_properties() == {"x": "1"}


# ============================================================================
# JSON Loader Tests
# ============================================================================

class TestJsonLoaders:
    """Tests for load_variables() and load_global_config()."""

    def test_load_variables(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text('{"ip": "10.0.0.1", "count": 3, "tags": ["a"]}')
        assert load_variables(path) == {"ip": "10.0.0.1", "count": 3, "tags": ["a"]}

    def test_load_global_config(self, tmp_path):
        path = tmp_path / "global.json"
        path.write_text('{"es.clustername": "metron"}')
        assert load_global_config(path) == {"es.clustername": "metron"}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid variables file"):
            load_variables(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(ConfigError, match="Invalid variables file .*not UTF-8"):
            load_variables(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "global.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="expected a JSON object"):
            load_global_config(path)


# ============================================================================
# Option Validation Tests
# ============================================================================

class TestValidateOptions:
    """Tests for validate_options()."""

    def test_all_none(self):
        validate_options()

    def test_existing_files(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("{}")
        validate_options(variables_file=str(path), properties_file=str(path))

    @pytest.mark.parametrize("kwarg,option", [
        ("variables_file", "variables"),
        ("properties_file", "properties"),
        ("global_config_file", "global config"),
    ])
    def test_missing_file(self, tmp_path, kwarg, option):
        missing = str(tmp_path / "missing.json")
        with pytest.raises(ConfigError, match=f"{option} file does not exist"):
            validate_options(**{kwarg: missing})
