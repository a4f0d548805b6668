# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connector-wide constants."""

# Connector name under which file connections are registered
CONNECTOR_NAME = "file"

__all__ = ["CONNECTOR_NAME"]
