# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File connector operations.

Exports:
    CheckFileExist: Reports whether a file or directory exists on a connection
"""

from file_connector.operations.check_file_exist import CheckFileExist

__all__: list[str] = ["CheckFileExist"]
