# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory message context.

Implements ProtocolMessageContext for hosts that do not bring their own
message representation, and for tests. Template parameters are supplied at
construction; results and faults are recorded on the instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional
from xml.etree.ElementTree import Element, tostring

from file_connector.models import ModelHandledFault


class MessageContext:
    """Mutable message context scoped to a single mediation.

    Example:
        >>> ctx = MessageContext({"name": "local", "path": "a.txt",
        ...                       "includeResultTo": "MESSAGE_BODY"})
        >>> CheckFileExist(handler).connect(ctx)
        >>> ctx.body_as_string()
        '<checkExistResult><success>true</success>...'
    """

    def __init__(
        self,
        parameters: Optional[Mapping[str, object]] = None,
        properties: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._parameters: dict[str, object] = dict(parameters or {})
        self.properties: dict[str, str] = dict(properties or {})
        self.body: Optional[Element] = None
        self.fault: Optional[ModelHandledFault] = None

    def lookup_parameter(self, name: str) -> object | None:
        return self._parameters.get(name)

    def set_body(self, element: Element) -> None:
        self.body = element

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def set_fault(self, fault: ModelHandledFault) -> None:
        self.fault = fault

    @property
    def is_faulted(self) -> bool:
        return self.fault is not None

    def body_as_string(self) -> str:
        """Serialise the current body, or return an empty string if unset."""
        if self.body is None:
            return ""
        return tostring(self.body, encoding="unicode")


__all__ = ["MessageContext"]
