# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection Handler - registry of pooled file system connections.

Connections are keyed by ``(connector_name, connection_name)`` and borrowed
by operations for the duration of a call. The handler is passed to
operations explicitly; there is no process-wide instance.

Backend Factories:
    Each EnumFileSystemProtocol maps to a factory building a connection from
    a ModelFileSystemConnectionConfig. LOCAL is registered by default; hosts
    register factories for remote protocols with ``register_backend``.

Thread Safety:
    The registry and factory table are guarded by a threading.Lock.
    Borrowed connections are not locked; callers own them for the call.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from file_connector.connection.handler_local_file_system import (
    HandlerLocalFileSystem,
)
from file_connector.connection.model_file_system_connection_config import (
    ModelFileSystemConnectionConfig,
)
from file_connector.constants import CONNECTOR_NAME
from file_connector.enums import EnumFileSystemProtocol
from file_connector.errors import (
    ConnectionNotFoundError,
    InvalidConfigurationError,
    ModelConnectorErrorContext,
)
from file_connector.protocols import ProtocolFileSystemHandler

logger = logging.getLogger(__name__)

BackendFactory = Callable[[ModelFileSystemConnectionConfig], ProtocolFileSystemHandler]


class ConnectionHandler:
    """Thread-safe registry of named file system connections.

    Example:
        >>> handler = ConnectionHandler()
        >>> handler.create_connection_from_config(
        ...     ModelFileSystemConnectionConfig(
        ...         name="local", working_directory="/srv/archive/"
        ...     )
        ... )
        >>> handler.get_connection("file", "local").base_directory_path
        '/srv/archive/'
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._connections: dict[tuple[str, str], ProtocolFileSystemHandler] = {}
        self._backends: dict[EnumFileSystemProtocol, BackendFactory] = {
            EnumFileSystemProtocol.LOCAL: HandlerLocalFileSystem,
        }

    @classmethod
    def from_configs(
        cls, configs: Iterable[ModelFileSystemConnectionConfig]
    ) -> ConnectionHandler:
        """Build a handler with one connection per config under CONNECTOR_NAME.

        If any config fails, connections already created are shut down before
        the error propagates.
        """
        handler = cls()
        try:
            for config in configs:
                handler.create_connection_from_config(config)
        except Exception:
            handler.shutdown_connections()
            raise
        return handler

    def register_backend(
        self, protocol: EnumFileSystemProtocol, factory: BackendFactory
    ) -> None:
        """Register (or replace) the factory serving a backend protocol."""
        with self._lock:
            self._backends[protocol] = factory
        logger.debug(
            "Registered file system backend",
            extra={"protocol": protocol.value},
        )

    def create_connection(
        self,
        connector_name: str,
        connection_name: str,
        connection: ProtocolFileSystemHandler,
    ) -> None:
        """Register a connection, closing any connection it replaces."""
        key = (connector_name, connection_name)
        with self._lock:
            replaced = self._connections.get(key)
            self._connections[key] = connection
        if replaced is not None and replaced is not connection:
            self._close_connection(key, replaced)
        logger.info(
            "Registered file connection",
            extra={
                "connector_name": connector_name,
                "connection_name": connection_name,
                "protocol": connection.protocol.value,
            },
        )

    def create_connection_from_config(
        self,
        config: ModelFileSystemConnectionConfig,
        connector_name: str = CONNECTOR_NAME,
    ) -> ProtocolFileSystemHandler:
        """Build a connection through the registered backend and register it.

        Raises:
            InvalidConfigurationError: If no backend is registered for the
                configured protocol.
        """
        with self._lock:
            factory = self._backends.get(config.protocol)
        if factory is None:
            raise InvalidConfigurationError(
                f"No backend registered for protocol '{config.protocol.value}'",
                context=ModelConnectorErrorContext.with_correlation(
                    protocol=config.protocol,
                    operation="create_connection",
                    target_name=config.name,
                ),
            )
        connection = factory(config)
        self.create_connection(connector_name, config.name, connection)
        return connection

    def get_connection(
        self, connector_name: str, connection_name: str
    ) -> ProtocolFileSystemHandler:
        """Return the registered connection.

        Raises:
            ConnectionNotFoundError: If no connection is registered under the
                given names.
        """
        with self._lock:
            connection = self._connections.get((connector_name, connection_name))
        if connection is None:
            raise ConnectionNotFoundError(
                f"Connection '{connection_name}' is not configured for "
                f"connector '{connector_name}'",
                context=ModelConnectorErrorContext.with_correlation(
                    operation="get_connection",
                    target_name=connection_name,
                ),
            )
        return connection

    def check_if_connection_exists(
        self, connector_name: str, connection_name: str
    ) -> bool:
        with self._lock:
            return (connector_name, connection_name) in self._connections

    def shutdown_connections(self, connector_name: str | None = None) -> None:
        """Close and remove connections, optionally only those of one connector.

        Close failures are logged and do not stop the remaining shutdowns.
        """
        with self._lock:
            keys = [
                key
                for key in self._connections
                if connector_name is None or key[0] == connector_name
            ]
            removed = [(key, self._connections.pop(key)) for key in keys]
        for key, connection in removed:
            self._close_connection(key, connection)

    def _close_connection(
        self, key: tuple[str, str], connection: ProtocolFileSystemHandler
    ) -> None:
        try:
            connection.close()
        except Exception as e:
            logger.exception(
                "Error while closing file connection",
                extra={
                    "connector_name": key[0],
                    "connection_name": key[1],
                    "error_type": type(e).__name__,
                },
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)


__all__: list[str] = ["BackendFactory", "ConnectionHandler"]
