# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Collaborator protocols consumed by file connector operations.

Exports:
    ProtocolConnectionProvider: Named connection lookup
    ProtocolFileSystemHandler: Pooled backend connection
    ProtocolFileObject: Resolved file handle
    ProtocolMessageContext: Host message context
"""

from file_connector.protocols.protocol_connection_provider import (
    ProtocolConnectionProvider,
)
from file_connector.protocols.protocol_file_object import ProtocolFileObject
from file_connector.protocols.protocol_file_system_handler import (
    ProtocolFileSystemHandler,
)
from file_connector.protocols.protocol_message_context import (
    ProtocolMessageContext,
)

__all__: list[str] = [
    "ProtocolConnectionProvider",
    "ProtocolFileObject",
    "ProtocolFileSystemHandler",
    "ProtocolMessageContext",
]
