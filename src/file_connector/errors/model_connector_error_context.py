# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connector Error Context Configuration Model.

This module defines the configuration model for file connector error context,
encapsulating common structured fields to reduce __init__ parameter count
while keeping them strongly typed.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from file_connector.enums import EnumFileSystemProtocol


class ModelConnectorErrorContext(BaseModel):
    """Configuration model for file connector error context.

    Attributes:
        protocol: Storage backend protocol of the connection involved
        operation: Operation being performed (checkExist, get_connection, ...)
        target_name: Connection name or path the operation targeted
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelConnectorErrorContext(
        ...     protocol=EnumFileSystemProtocol.LOCAL,
        ...     operation="checkExist",
        ...     target_name="local-archive",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise FileOperationError("Failed to query file", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    protocol: Optional[EnumFileSystemProtocol] = Field(
        default=None,
        description="Storage backend protocol of the connection involved",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Connection name or path the operation targeted",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelConnectorErrorContext:
        """Build a context, generating a UUID4 correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, if any.
            **kwargs: Remaining context fields (protocol, operation, target_name).

        Returns:
            ModelConnectorErrorContext with a non-None correlation_id.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelConnectorErrorContext"]
