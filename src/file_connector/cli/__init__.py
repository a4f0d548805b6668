# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command line interface for the file connector."""

from file_connector.cli.commands import cli, main

__all__: list[str] = ["cli", "main"]
