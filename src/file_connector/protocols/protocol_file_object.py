# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for resolved file objects.

A file object is the handle a backend returns for a resolved path. It is
scoped to a single operation invocation: the operation resolves it, queries
it, and closes it on every exit path.

Error Handling:
    Implementations should raise FileOperationError (or let OSError
    propagate) when the backend cannot answer a query or release the handle.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "ProtocolFileObject",
]


@runtime_checkable
class ProtocolFileObject(Protocol):
    """Handle to a resolved file or directory on a storage backend."""

    def exists(self) -> bool:
        """Return True if a file or directory exists at the resolved path."""
        ...

    def close(self) -> None:
        """Release the handle. Must be safe to call more than once."""
        ...
