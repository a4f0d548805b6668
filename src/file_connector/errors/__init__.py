# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector Errors Module.

Exports:
    ModelConnectorErrorContext: Configuration model for bundled error context
    FileConnectorError: Base connector error class
    InvalidConfigurationError: Missing or invalid parameters and configuration
    ConnectionNotFoundError: Unknown connection name
    FileOperationError: Backend I/O failures

Correlation ID Assignment:
    - Propagate the correlation_id of the current invocation into error context
    - Use ModelConnectorErrorContext.with_correlation() to generate one when absent

Error Sanitization Guidelines:
    NEVER include credentials from connection definitions (passwords, keys,
    tokens) in error messages or context. Connection names, protocols,
    operation names and file paths are safe to include.
"""

from file_connector.errors.connector_errors import (
    ConnectionNotFoundError,
    FileConnectorError,
    FileOperationError,
    InvalidConfigurationError,
)
from file_connector.errors.model_connector_error_context import (
    ModelConnectorErrorContext,
)

__all__: list[str] = [
    "ModelConnectorErrorContext",
    "FileConnectorError",
    "InvalidConfigurationError",
    "ConnectionNotFoundError",
    "FileOperationError",
]
