"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from pattern_catalogue.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        result = expand_env_vars("$NONEXISTENT_VAR")
        assert result == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        environ = {k: v for k, v in os.environ.items() if k != "UNSET_LOG_DIR"}
        with patch.dict(os.environ, environ, clear=True):
            assert expand_env_vars("${UNSET_LOG_DIR:logs}/app.log") == "logs/app.log"

    def test_default_ignored_when_set(self):
        """Test ${VAR:default} prefers the environment value."""
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "/var/log/app.log"

    def test_empty_default(self):
        """Test an empty default expands to an empty string."""
        environ = {k: v for k, v in os.environ.items() if k != "UNSET_SUFFIX"}
        with patch.dict(os.environ, environ, clear=True):
            assert expand_env_vars("name${UNSET_SUFFIX:}") == "name"

    def test_expand_nested_dict_values(self):
        """Test expansion of environment variables in nested dictionary values."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file": {"path": "$TEST_VAR/catalogue.log"}},
                "other": "value",
            }
            result = expand_env_vars(config)
            assert result == {
                "logging": {"file": {"path": "/test/path/catalogue.log"}},
                "other": "value",
            }

    def test_expand_list_values(self):
        """Test expansion of environment variables in list values."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = ["$TEST_VAR/file1", "$TEST_VAR/file2", "normal_value"]
            result = expand_env_vars(config)
            assert result == ["/test/path/file1", "/test/path/file2", "normal_value"]

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        result = expand_env_vars(config)
        assert result == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"PATTERN_CATALOGUE_LOG_DIR": "/opt/catalogue"}):
            config = {
                "logging": {"file": {"path": "${PATTERN_CATALOGUE_LOG_DIR:logs}/catalogue.log"}},
                "demos": {"singleton_log_file": "app.log"},
            }
            result = expand_config_env_vars(config)
            assert result["logging"]["file"]["path"] == "/opt/catalogue/catalogue.log"
            assert result["demos"]["singleton_log_file"] == "app.log"

    def test_input_not_mutated(self):
        """Test expansion returns a new structure."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {"path": "$TEST_VAR"}
            expand_config_env_vars(config)
            assert config == {"path": "$TEST_VAR"}
