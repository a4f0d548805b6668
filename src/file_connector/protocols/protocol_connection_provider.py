# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for connection providers.

Operations receive a connection provider explicitly (constructor injection)
instead of reaching for a process-wide singleton. ConnectionHandler is the
bundled implementation; tests substitute fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from file_connector.protocols.protocol_file_system_handler import (
        ProtocolFileSystemHandler,
    )

__all__ = [
    "ProtocolConnectionProvider",
]


@runtime_checkable
class ProtocolConnectionProvider(Protocol):
    """Lookup of pooled file system connections by name."""

    def get_connection(
        self, connector_name: str, connection_name: str
    ) -> ProtocolFileSystemHandler:
        """Return the connection registered under the given names.

        Raises:
            ConnectionNotFoundError: If no such connection is registered.
        """
        ...
