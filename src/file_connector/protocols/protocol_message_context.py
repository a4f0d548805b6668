# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the mediation message context.

The message context is owned by the host mediation engine. Operations read
their template parameters from it and write results and faults back to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from file_connector.models.model_handled_fault import ModelHandledFault

__all__ = [
    "ProtocolMessageContext",
]


@runtime_checkable
class ProtocolMessageContext(Protocol):
    """Message context seen by connector operations."""

    def lookup_parameter(self, name: str) -> object | None:
        """Return the value of a template parameter, or None if unset."""
        ...

    def set_body(self, element: Element) -> None:
        """Replace the outgoing message body with the given document."""
        ...

    def set_property(self, name: str, value: str) -> None:
        """Set a named message property."""
        ...

    def set_fault(self, fault: ModelHandledFault) -> None:
        """Signal a handled fault to the host engine."""
        ...
