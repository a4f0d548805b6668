# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File connector for message mediation.

Provides connector operations over pooled file system connections. The
checkExist operation reports whether a file or directory exists and routes
the answer to the message body or a message property.

Exports:
    CheckFileExist: checkExist operation
    ConnectionHandler: Registry of pooled file connections
    MessageContext: In-memory message context
    ModelFileOperationResult: Operation outcome
"""

from file_connector.connection import ConnectionHandler
from file_connector.message_context import MessageContext
from file_connector.models import ModelFileOperationResult
from file_connector.operations import CheckFileExist

__version__ = "0.1.0"

__all__: list[str] = [
    "CheckFileExist",
    "ConnectionHandler",
    "MessageContext",
    "ModelFileOperationResult",
    "__version__",
]
