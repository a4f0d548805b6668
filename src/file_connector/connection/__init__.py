# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File connection management.

Exports:
    ConnectionHandler: Thread-safe registry of pooled file connections
    HandlerLocalFileSystem: Local disk backend
    LocalFileObject: Resolved local path handle
    ModelFileSystemConnectionConfig: Named connection definition
    load_connection_configs: YAML loader for connection definitions
"""

from file_connector.connection.connection_config_loader import (
    load_connection_configs,
)
from file_connector.connection.connection_handler import ConnectionHandler
from file_connector.connection.handler_local_file_system import (
    HandlerLocalFileSystem,
    LocalFileObject,
)
from file_connector.connection.model_file_system_connection_config import (
    ModelFileSystemConnectionConfig,
)

__all__: list[str] = [
    "ConnectionHandler",
    "HandlerLocalFileSystem",
    "LocalFileObject",
    "ModelFileSystemConnectionConfig",
    "load_connection_configs",
]
