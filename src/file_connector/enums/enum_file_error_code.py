# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector Error Code Enumeration.

Defines the closed set of error categories reported by file connector
operations. Each member carries the numeric code and the detail string
written into failed result documents and handled faults.

Error Codes:
    | Member | Code | Detail |
    |--------|------|--------|
    | INVALID_CONFIGURATION | 700107 | FILE:INVALID_CONFIGURATION |
    | OPERATION_ERROR | 700108 | FILE:OPERATION_ERROR |
"""

from enum import Enum


class EnumFileErrorCode(str, Enum):
    """Error categories for file connector operation results.

    Attributes:
        INVALID_CONFIGURATION: Caller supplied missing or invalid parameters.
        OPERATION_ERROR: I/O or backend failure while performing the operation.
    """

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    OPERATION_ERROR = "OPERATION_ERROR"

    @property
    def code(self) -> str:
        """Numeric error code reported to the host engine."""
        return _ERROR_CODES[self]

    @property
    def detail(self) -> str:
        """Connector-qualified error detail, e.g. ``FILE:OPERATION_ERROR``."""
        return f"FILE:{self.value}"


_ERROR_CODES: dict[EnumFileErrorCode, str] = {
    EnumFileErrorCode.INVALID_CONFIGURATION: "700107",
    EnumFileErrorCode.OPERATION_ERROR: "700108",
}


__all__ = ["EnumFileErrorCode"]
