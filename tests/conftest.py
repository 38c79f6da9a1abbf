"""Pytest configuration and shared fixtures for fieldtree tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from fieldtree.models.field_error import FieldError


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def duplicate_error_tree() -> FieldError:
    """Tree with two identical one-of conflicts and one invalid value."""
    return FieldError(
        children=[
            FieldError(
                message="expected exactly one, got neither",
                paths=["field1", "field2"],
            ),
            FieldError(
                message="expected exactly one, got neither",
                paths=["field1", "field2"],
            ),
            FieldError(message="invalid value: ", paths=["path1", "path2"]),
        ]
    )
