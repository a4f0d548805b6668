# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for file_connector unit tests.

Available Utilities:
    Fake File System:
        - FakeFileSystemHandler: Connection double counting resolve/close calls
        - FakeFileObject: File object double
        - FakeConnectionProvider: Connection provider backed by a dict
"""

from tests.helpers.fake_file_system import (
    FakeConnectionProvider,
    FakeFileObject,
    FakeFileSystemHandler,
)

__all__ = [
    "FakeConnectionProvider",
    "FakeFileObject",
    "FakeFileSystemHandler",
]
