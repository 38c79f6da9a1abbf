"""Tests for custom exception hierarchy in fieldtree.lib.errors."""

import builtins

from fieldtree.lib.errors import ConfigError, FieldTreeError, FileNotFoundError


class TestFieldTreeError:
    """Tests for base FieldTreeError exception."""

    def test_fieldtree_error_creates_with_message(self) -> None:
        """Test that FieldTreeError can be created with a message."""
        error = FieldTreeError("Test error message")
        assert str(error) == "Test error message"

    def test_fieldtree_error_is_exception(self) -> None:
        """Test that FieldTreeError is an Exception subclass."""
        assert isinstance(FieldTreeError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("base_path", "must be a list")
        assert str(error) == "Configuration error in 'base_path': must be a list"

    def test_config_error_keeps_attributes(self) -> None:
        """Test that ConfigError exposes field and message."""
        error = ConfigError("log_level", "unknown level")
        assert error.field == "log_level"
        assert error.message == "unknown level"
        assert isinstance(error, FieldTreeError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_file_not_found_includes_path(self) -> None:
        """Test that the path and hint appear in the message."""
        error = FileNotFoundError("/tmp/fieldtree.yaml", "Create it first.")
        assert "/tmp/fieldtree.yaml" in str(error)
        assert "Create it first." in str(error)
        assert isinstance(error, FieldTreeError)

    def test_does_not_shadow_builtin_hierarchy(self) -> None:
        """Test that the package error is not a builtin FileNotFoundError."""
        error = FileNotFoundError("x", "y")
        assert not isinstance(error, builtins.FileNotFoundError)
