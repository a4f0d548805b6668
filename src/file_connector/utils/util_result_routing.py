# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result routing utilities shared by file connector operations.

Functions:
    set_result_as_payload: Replace the message body with a result document
    set_result_as_property: Write the result value to a message property
    signal_handled_fault: Record a handled fault on the message context
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from file_connector.enums import EnumFileErrorCode
from file_connector.models import ModelFileOperationResult, ModelHandledFault

if TYPE_CHECKING:
    from file_connector.protocols import ProtocolMessageContext

logger = logging.getLogger(__name__)


def set_result_as_payload(
    message_context: ProtocolMessageContext, result: ModelFileOperationResult
) -> None:
    """Replace the outgoing message body with the rendered result document."""
    message_context.set_body(result.to_element())


def set_result_as_property(
    message_context: ProtocolMessageContext,
    property_name: str,
    result: ModelFileOperationResult,
) -> None:
    """Set ``property_name`` to the result value of a successful result.

    Raises:
        ValueError: If the result carries no result value.
    """
    if result.result_value is None:
        raise ValueError(
            f"Result of '{result.operation}' has no value to set as a property"
        )
    message_context.set_property(property_name, result.result_value)


def signal_handled_fault(
    message_context: ProtocolMessageContext,
    error_code: EnumFileErrorCode,
    message: str,
    cause: str,
    correlation_id: UUID,
) -> ModelHandledFault:
    """Record a handled fault on the message context and return it."""
    fault = ModelHandledFault(
        error_code=error_code,
        message=message,
        cause=cause,
        correlation_id=correlation_id,
    )
    message_context.set_fault(fault)
    logger.debug(
        "Signalled handled fault",
        extra={
            "error_code": error_code.value,
            "correlation_id": str(correlation_id),
        },
    )
    return fault


__all__: list[str] = [
    "set_result_as_payload",
    "set_result_as_property",
    "signal_handled_fault",
]
