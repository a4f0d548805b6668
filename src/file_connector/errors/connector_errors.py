# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector Error Classes.

Error Hierarchy:
    FileConnectorError (base connector error)
    ├── InvalidConfigurationError
    │   └── ConnectionNotFoundError
    └── FileOperationError

All errors:
    - Carry an EnumFileErrorCode used to build failed operation results
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelConnectorErrorContext for bundled context parameters
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from file_connector.enums import EnumFileErrorCode
from file_connector.errors.model_connector_error_context import (
    ModelConnectorErrorContext,
)


class FileConnectorError(Exception):
    """Base error class for file connector errors.

    Structured Fields (via ModelConnectorErrorContext):
        protocol: Storage backend protocol (local, sftp, s3, ...)
        operation: Operation being performed
        correlation_id: Request correlation ID for tracking
        target_name: Connection name or path involved

    Example:
        >>> context = ModelConnectorErrorContext(
        ...     operation="checkExist",
        ...     target_name="local-archive",
        ... )
        >>> raise FileConnectorError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumFileErrorCode = EnumFileErrorCode.OPERATION_ERROR,
        context: Optional[ModelConnectorErrorContext] = None,
    ) -> None:
        """Initialize FileConnectorError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error category (defaults to OPERATION_ERROR)
            context: Bundled connector context (protocol, operation, etc.)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context

    @property
    def correlation_id(self) -> Optional[UUID]:
        """Correlation ID from the bundled context, if any."""
        return self.context.correlation_id if self.context is not None else None

    def structured_context(self) -> dict[str, object]:
        """Return context fields suitable for a logging ``extra`` dict."""
        fields: dict[str, object] = {}
        if self.context is not None:
            if self.context.protocol is not None:
                fields["protocol"] = self.context.protocol.value
            if self.context.operation is not None:
                fields["operation"] = self.context.operation
            if self.context.target_name is not None:
                fields["target_name"] = self.context.target_name
            if self.context.correlation_id is not None:
                fields["correlation_id"] = str(self.context.correlation_id)
        fields["error_code"] = self.error_code.value
        return fields


class InvalidConfigurationError(FileConnectorError):
    """Raised when operation or connection configuration is missing or invalid.

    Used for missing template parameters, unsupported result destinations,
    malformed connection definitions, or unregistered backend protocols.

    Example:
        >>> raise InvalidConfigurationError(
        ...     "Parameter 'path' is not provided",
        ...     context=ModelConnectorErrorContext(operation="checkExist"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelConnectorErrorContext] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumFileErrorCode.INVALID_CONFIGURATION,
            context=context,
        )


class ConnectionNotFoundError(InvalidConfigurationError):
    """Raised when no connection is registered under the requested name."""


class FileOperationError(FileConnectorError):
    """Raised when a backend fails to resolve, query, or release a file.

    Example:
        >>> raise FileOperationError(
        ...     "Failed to query existence",
        ...     context=ModelConnectorErrorContext(
        ...         protocol=EnumFileSystemProtocol.LOCAL,
        ...         operation="exists",
        ...         target_name="/data/reports/summary.csv",
        ...     ),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelConnectorErrorContext] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumFileErrorCode.OPERATION_ERROR,
            context=context,
        )


__all__ = [
    "FileConnectorError",
    "InvalidConfigurationError",
    "ConnectionNotFoundError",
    "FileOperationError",
]
