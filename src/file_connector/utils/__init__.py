# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for file connector operations."""

from file_connector.utils.util_result_routing import (
    set_result_as_payload,
    set_result_as_property,
    signal_handled_fault,
)

__all__: list[str] = [
    "set_result_as_payload",
    "set_result_as_property",
    "signal_handled_fault",
]
