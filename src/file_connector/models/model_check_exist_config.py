# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Check Exist Operation Configuration Model.

Typed per-invocation configuration for the checkExist operation. Template
parameters are read from the message context once, validated here, and the
operation works only with the resulting model.

Template Parameters:
    name: Connection name registered in the ConnectionHandler (required)
    path: Path relative to the connection's base directory (required)
    includeResultTo: MESSAGE_BODY or MESSAGE_PROPERTY (required)
    resultPropertyName: Property to write to (required for MESSAGE_PROPERTY)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from file_connector.enums import EnumResultDestination
from file_connector.errors import (
    InvalidConfigurationError,
    ModelConnectorErrorContext,
)

if TYPE_CHECKING:
    from file_connector.protocols import ProtocolMessageContext

CONNECTION_NAME_PARAM = "name"
PATH_PARAM = "path"
INCLUDE_RESULT_TO_PARAM = "includeResultTo"
RESULT_PROPERTY_NAME_PARAM = "resultPropertyName"


class ModelCheckExistConfig(BaseModel):
    """Validated parameters of one checkExist invocation.

    Attributes:
        connection_name: Name of the pooled connection to borrow
        path: Path appended verbatim to the connection's base directory
        include_result_to: Where the result is written
        result_property_name: Property name when writing to a message property
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    connection_name: str = Field(
        min_length=1,
        description="Name of the pooled connection to borrow",
    )
    path: str = Field(
        min_length=1,
        description="Path appended verbatim to the connection's base directory",
    )
    include_result_to: EnumResultDestination = Field(
        description="Where the result is written",
    )
    result_property_name: Optional[str] = Field(
        default=None,
        description="Property name when writing to a message property",
    )

    @model_validator(mode="after")
    def _require_property_name(self) -> ModelCheckExistConfig:
        if (
            self.include_result_to == EnumResultDestination.MESSAGE_PROPERTY
            and not self.result_property_name
        ):
            raise ValueError("Property name to set operation result is required")
        return self

    @classmethod
    def from_message_context(
        cls,
        message_context: ProtocolMessageContext,
        correlation_id: Optional[UUID] = None,
    ) -> ModelCheckExistConfig:
        """Read and validate template parameters from the message context.

        Args:
            message_context: Context providing template parameter lookup.
            correlation_id: Correlation ID for error context.

        Returns:
            Validated configuration.

        Raises:
            InvalidConfigurationError: If a required parameter is missing or
                empty, or the result destination is not recognised.
        """
        ctx = ModelConnectorErrorContext.with_correlation(
            correlation_id=correlation_id,
            operation="checkExist",
        )

        connection_name = _lookup_str(message_context, CONNECTION_NAME_PARAM)
        if not connection_name:
            raise InvalidConfigurationError(
                "Connection name is not set", context=ctx
            )

        path = _lookup_str(message_context, PATH_PARAM)
        if not path:
            raise InvalidConfigurationError(
                f"Parameter '{PATH_PARAM}' is not provided", context=ctx
            )

        destination_raw = _lookup_str(message_context, INCLUDE_RESULT_TO_PARAM)
        try:
            destination = EnumResultDestination(destination_raw)
        except ValueError as e:
            raise InvalidConfigurationError(
                f"Parameter '{INCLUDE_RESULT_TO_PARAM}' is mandatory and must be "
                f"one of: {', '.join(d.value for d in EnumResultDestination)}",
                context=ctx,
            ) from e

        property_name: Optional[str] = None
        if destination == EnumResultDestination.MESSAGE_PROPERTY:
            property_name = _lookup_str(message_context, RESULT_PROPERTY_NAME_PARAM)

        try:
            return cls(
                connection_name=connection_name,
                path=path,
                include_result_to=destination,
                result_property_name=property_name,
            )
        except ValidationError as e:
            messages = "; ".join(
                str(error["msg"]).removeprefix("Value error, ")
                for error in e.errors()
            )
            raise InvalidConfigurationError(messages, context=ctx) from e


def _lookup_str(message_context: ProtocolMessageContext, name: str) -> str | None:
    """Look up a template parameter, normalising non-string values to str."""
    value = message_context.lookup_parameter(name)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


__all__: list[str] = [
    "ModelCheckExistConfig",
    "CONNECTION_NAME_PARAM",
    "PATH_PARAM",
    "INCLUDE_RESULT_TO_PARAM",
    "RESULT_PROPERTY_NAME_PARAM",
]
