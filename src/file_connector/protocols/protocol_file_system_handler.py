# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for file system connection handles.

A file system handler is the pooled connection object registered in the
ConnectionHandler under a connection name. Operations borrow it for the
duration of a call and never close it.

Path Resolution:
    Operations build full paths as ``base_directory_path + path``. The
    concatenation is textual: no separator is inserted and no ``..``
    segments are removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from file_connector.enums import EnumFileSystemProtocol
    from file_connector.protocols.protocol_file_object import ProtocolFileObject

__all__ = [
    "ProtocolFileSystemHandler",
]


@runtime_checkable
class ProtocolFileSystemHandler(Protocol):
    """Pooled connection to a configured storage backend."""

    @property
    def protocol(self) -> EnumFileSystemProtocol:
        """Storage backend protocol served by this handle."""
        ...

    @property
    def base_directory_path(self) -> str:
        """Base directory prefix prepended to caller-supplied paths."""
        ...

    def resolve_file(self, path: str) -> ProtocolFileObject:
        """Resolve a full path to a file object.

        Raises:
            FileOperationError: If the backend cannot resolve the path.
        """
        ...

    def close(self) -> None:
        """Release backend resources held by the connection."""
        ...
