# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handled Fault Model.

A handled fault is how an operation tells the host engine that the
invocation failed after the failure was already recorded in the message
body. Hosts route it to their fault sequence instead of treating it as an
unhandled crash.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from file_connector.enums import EnumFileErrorCode


class ModelHandledFault(BaseModel):
    """Fault signal set on the message context by a failed operation.

    Attributes:
        error_code: Closed error category of the failure
        message: Operation-level description, naming the target path
        cause: Message of the underlying error
        correlation_id: Correlation ID of the failed invocation
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    error_code: EnumFileErrorCode = Field(
        description="Closed error category of the failure",
    )
    message: str = Field(
        description="Operation-level description, naming the target path",
    )
    cause: str = Field(
        default="",
        description="Message of the underlying error",
    )
    correlation_id: UUID = Field(
        description="Correlation ID of the failed invocation",
    )

    @property
    def code(self) -> str:
        return self.error_code.code

    @property
    def detail(self) -> str:
        return self.error_code.detail


__all__: list[str] = ["ModelHandledFault"]
