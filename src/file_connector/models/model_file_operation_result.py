# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Operation Result Model.

This module defines the result produced by a single file connector operation
invocation. A result is constructed once, routed to the message context, and
discarded.

Document Shape:
    Results render to an XML document rooted at ``{operation}Result``::

        <checkExistResult>
            <success>true</success>
            <fileExists>true</fileExists>
        </checkExistResult>

    Failed results carry the error instead of the result element::

        <checkExistResult>
            <success>false</success>
            <errorCode>700107</errorCode>
            <errorDetail>FILE:INVALID_CONFIGURATION</errorDetail>
            <errorMessage>Parameter 'path' is not provided</errorMessage>
        </checkExistResult>
"""

from __future__ import annotations

from typing import Optional
from xml.etree.ElementTree import Element, SubElement

from pydantic import BaseModel, ConfigDict, Field, model_validator

from file_connector.enums import EnumFileErrorCode
from file_connector.models.model_operation_error import ModelOperationError


class ModelFileOperationResult(BaseModel):
    """Outcome of a file connector operation.

    Attributes:
        operation: Operation name constant (e.g. "checkExist")
        success: Whether the operation succeeded
        result_name: Name of the single result element on success
        result_value: Text content of the result element on success
        error: Error category and message on failure

    Example:
        >>> result = ModelFileOperationResult.succeeded(
        ...     "checkExist", "fileExists", "true"
        ... )
        >>> result.success
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str = Field(
        min_length=1,
        description="Operation name constant",
    )
    success: bool = Field(
        description="Whether the operation succeeded",
    )
    result_name: Optional[str] = Field(
        default=None,
        description="Name of the result element on success",
    )
    result_value: Optional[str] = Field(
        default=None,
        description="Text content of the result element on success",
    )
    error: Optional[ModelOperationError] = Field(
        default=None,
        description="Error category and message on failure",
    )

    @model_validator(mode="after")
    def _check_outcome_consistency(self) -> ModelFileOperationResult:
        if self.success and self.error is not None:
            raise ValueError("Successful result must not carry an error")
        if not self.success and self.error is None:
            raise ValueError("Failed result must carry an error")
        if (self.result_name is None) != (self.result_value is None):
            raise ValueError("result_name and result_value must be set together")
        return self

    @classmethod
    def succeeded(
        cls, operation: str, result_name: str, result_value: str
    ) -> ModelFileOperationResult:
        """Build a successful result carrying a single result element."""
        return cls(
            operation=operation,
            success=True,
            result_name=result_name,
            result_value=result_value,
        )

    @classmethod
    def failed(
        cls, operation: str, error_code: EnumFileErrorCode, message: str
    ) -> ModelFileOperationResult:
        """Build a failed result carrying an error category and message."""
        return cls(
            operation=operation,
            success=False,
            error=ModelOperationError(error_code=error_code, message=message),
        )

    @property
    def root_name(self) -> str:
        return f"{self.operation}Result"

    def result_element(self) -> Optional[Element]:
        """Return the standalone result element, or None for failed results."""
        if self.result_name is None:
            return None
        element = Element(self.result_name)
        element.text = self.result_value
        return element

    def to_element(self) -> Element:
        """Render the result as a message body document."""
        root = Element(self.root_name)
        SubElement(root, "success").text = str(self.success).lower()
        if self.error is not None:
            SubElement(root, "errorCode").text = self.error.code
            SubElement(root, "errorDetail").text = self.error.detail
            SubElement(root, "errorMessage").text = self.error.message
        result = self.result_element()
        if result is not None:
            root.append(result)
        return root


__all__: list[str] = ["ModelFileOperationResult"]
