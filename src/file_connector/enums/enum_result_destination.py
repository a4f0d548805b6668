# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result Destination Enumeration.

Selects where an operation writes its result on the message context.
"""

from enum import Enum


class EnumResultDestination(str, Enum):
    """Destination for an operation result.

    Attributes:
        MESSAGE_BODY: Replace the outgoing message body with the result document.
        MESSAGE_PROPERTY: Set a named message property to the result value.
    """

    MESSAGE_BODY = "MESSAGE_BODY"
    MESSAGE_PROPERTY = "MESSAGE_PROPERTY"


__all__ = ["EnumResultDestination"]
