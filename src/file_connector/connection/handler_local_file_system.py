# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Local File System Handler - local disk backend for file connections.

Serves connections configured with ``protocol: local``. Paths resolve to
LocalFileObject instances wrapping pathlib.Path.

Path Handling:
    - An optional ``file://`` scheme prefix is stripped before resolution
    - No normalisation is applied; ``..`` segments reach the filesystem as-is
"""

from __future__ import annotations

import logging
from pathlib import Path

from file_connector.connection.model_file_system_connection_config import (
    ModelFileSystemConnectionConfig,
)
from file_connector.enums import EnumFileSystemProtocol
from file_connector.errors import (
    FileOperationError,
    InvalidConfigurationError,
    ModelConnectorErrorContext,
)

logger = logging.getLogger(__name__)

_FILE_SCHEME = "file://"


class LocalFileObject:
    """Handle to a path on local disk.

    Attributes:
        path: Resolved path string (scheme stripped)
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def exists(self) -> bool:
        """Return True if a file or directory exists at the path.

        Raises:
            FileOperationError: If the handle is closed or the filesystem
                query fails.
        """
        if self._closed:
            raise FileOperationError(
                f"File object is closed: {self.path}",
                context=self._error_context("exists"),
            )
        try:
            return Path(self.path).exists()
        except OSError as e:
            raise FileOperationError(
                f"Failed to query existence of {self.path}: {e}",
                context=self._error_context("exists"),
            ) from e

    def close(self) -> None:
        self._closed = True

    def _error_context(self, operation: str) -> ModelConnectorErrorContext:
        return ModelConnectorErrorContext.with_correlation(
            protocol=EnumFileSystemProtocol.LOCAL,
            operation=operation,
            target_name=self.path,
        )

    def __repr__(self) -> str:
        return f"LocalFileObject({self.path!r})"


class HandlerLocalFileSystem:
    """Pooled local disk connection.

    Example:
        >>> handler = HandlerLocalFileSystem(
        ...     ModelFileSystemConnectionConfig(
        ...         name="local", working_directory="/srv/archive/"
        ...     )
        ... )
        >>> handler.resolve_file(handler.base_directory_path + "a.txt").exists()
        False
    """

    def __init__(self, config: ModelFileSystemConnectionConfig) -> None:
        if config.protocol != EnumFileSystemProtocol.LOCAL:
            raise InvalidConfigurationError(
                "HandlerLocalFileSystem cannot serve protocol "
                f"'{config.protocol.value}'",
                context=ModelConnectorErrorContext.with_correlation(
                    protocol=config.protocol,
                    operation="create_connection",
                    target_name=config.name,
                ),
            )
        self._config = config
        self._closed = False

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def protocol(self) -> EnumFileSystemProtocol:
        return EnumFileSystemProtocol.LOCAL

    @property
    def base_directory_path(self) -> str:
        return self._config.working_directory

    def resolve_file(self, path: str) -> LocalFileObject:
        """Resolve a full path to a LocalFileObject.

        Raises:
            FileOperationError: If the connection has been closed.
        """
        if self._closed:
            raise FileOperationError(
                f"Connection '{self.name}' is closed",
                context=ModelConnectorErrorContext.with_correlation(
                    protocol=EnumFileSystemProtocol.LOCAL,
                    operation="resolve_file",
                    target_name=self.name,
                ),
            )
        if path.startswith(_FILE_SCHEME):
            path = path[len(_FILE_SCHEME) :]
        logger.debug(
            "Resolved local file",
            extra={"connection_name": self.name, "path": path},
        )
        return LocalFileObject(path)

    def close(self) -> None:
        self._closed = True
        logger.debug(
            "Closed local file system connection",
            extra={"connection_name": self.name},
        )


__all__: list[str] = ["HandlerLocalFileSystem", "LocalFileObject"]
