"""Pytest configuration and shared fixtures for file_connector tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from file_connector.connection import (
    ConnectionHandler,
    ModelFileSystemConnectionConfig,
)


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        assert callable(
            getattr(obj, method_name)
        ), f"{name}.{method_name} must be callable"


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory for a local connection, resolved to canonical form."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory.resolve()


@pytest.fixture
def local_connection_handler(work_dir: Path) -> Iterator[ConnectionHandler]:
    """ConnectionHandler with a ``local`` connection rooted at work_dir.

    The working directory carries a trailing separator because paths are
    concatenated verbatim.
    """
    handler = ConnectionHandler.from_configs(
        [
            ModelFileSystemConnectionConfig(
                name="local", working_directory=f"{work_dir}/"
            )
        ]
    )
    yield handler
    handler.shutdown_connections()
