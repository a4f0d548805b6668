# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory file system fakes for operation tests.

Available Utilities:
    FakeFileSystemHandler: Connection double counting resolve/close calls
    FakeFileObject: File object double backed by a set of existing paths
    FakeConnectionProvider: Connection provider backed by a dict

Usage Example:
    >>> backend = FakeFileSystemHandler(
    ...     base_directory_path="/data/", existing={"/data/a.txt"}
    ... )
    >>> provider = FakeConnectionProvider({"local": backend})
    >>> CheckFileExist(provider).connect(ctx)
    >>> backend.open_count == backend.close_count
    True
"""

from __future__ import annotations

from collections.abc import Iterable

from file_connector.enums import EnumFileSystemProtocol
from file_connector.errors import ConnectionNotFoundError


class FakeFileObject:
    """File object double reporting existence from its owning handler."""

    def __init__(self, backend: FakeFileSystemHandler, path: str) -> None:
        self._backend = backend
        self.path = path
        self.close_calls = 0

    def exists(self) -> bool:
        self._backend.exists_calls += 1
        if self._backend.exists_error is not None:
            raise self._backend.exists_error
        return self.path in self._backend.existing

    def close(self) -> None:
        self.close_calls += 1
        self._backend.close_count += 1
        if self._backend.close_error is not None:
            raise self._backend.close_error


class FakeFileSystemHandler:
    """Connection double counting resolved and closed file objects.

    Attributes:
        existing: Full paths reported as existing
        resolved_paths: Every path passed to resolve_file, in order
        open_count: Number of file objects handed out
        close_count: Number of close() calls on handed-out file objects
        exists_calls: Number of exists() calls
        connection_closed: Whether close() was called on the connection
    """

    def __init__(
        self,
        base_directory_path: str = "/data/",
        existing: Iterable[str] = (),
        resolve_error: Exception | None = None,
        exists_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self._base_directory_path = base_directory_path
        self.existing = set(existing)
        self.resolve_error = resolve_error
        self.exists_error = exists_error
        self.close_error = close_error
        self.resolved_paths: list[str] = []
        self.file_objects: list[FakeFileObject] = []
        self.close_count = 0
        self.exists_calls = 0
        self.connection_closed = False

    @property
    def protocol(self) -> EnumFileSystemProtocol:
        return EnumFileSystemProtocol.LOCAL

    @property
    def base_directory_path(self) -> str:
        return self._base_directory_path

    @property
    def open_count(self) -> int:
        return len(self.file_objects)

    def resolve_file(self, path: str) -> FakeFileObject:
        self.resolved_paths.append(path)
        if self.resolve_error is not None:
            raise self.resolve_error
        file_object = FakeFileObject(self, path)
        self.file_objects.append(file_object)
        return file_object

    def close(self) -> None:
        self.connection_closed = True


class FakeConnectionProvider:
    """Connection provider double keyed by connection name."""

    def __init__(self, connections: dict[str, FakeFileSystemHandler]) -> None:
        self._connections = connections
        self.requests: list[tuple[str, str]] = []

    def get_connection(
        self, connector_name: str, connection_name: str
    ) -> FakeFileSystemHandler:
        self.requests.append((connector_name, connection_name))
        try:
            return self._connections[connection_name]
        except KeyError:
            raise ConnectionNotFoundError(
                f"Connection '{connection_name}' is not configured"
            ) from None


__all__ = [
    "FakeConnectionProvider",
    "FakeFileObject",
    "FakeFileSystemHandler",
]
