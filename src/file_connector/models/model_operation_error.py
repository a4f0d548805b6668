# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Error Model.

Error payload carried by a failed ModelFileOperationResult.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from file_connector.enums import EnumFileErrorCode


class ModelOperationError(BaseModel):
    """Error category and human-readable message of a failed operation.

    Attributes:
        error_code: Closed error category (INVALID_CONFIGURATION, OPERATION_ERROR)
        message: Message of the underlying failure
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    error_code: EnumFileErrorCode = Field(
        description="Closed error category of the failure",
    )
    message: str = Field(
        default="",
        description="Message of the underlying failure",
    )

    @property
    def code(self) -> str:
        return self.error_code.code

    @property
    def detail(self) -> str:
        return self.error_code.detail


__all__: list[str] = ["ModelOperationError"]
