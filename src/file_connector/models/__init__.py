# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector Models Module.

Exports:
    ModelCheckExistConfig: Validated checkExist invocation parameters
    ModelFileOperationResult: Operation outcome rendered into the message body
    ModelHandledFault: Fault signal handed to the host engine
    ModelOperationError: Error payload of a failed result
"""

from file_connector.models.model_check_exist_config import ModelCheckExistConfig
from file_connector.models.model_file_operation_result import (
    ModelFileOperationResult,
)
from file_connector.models.model_handled_fault import ModelHandledFault
from file_connector.models.model_operation_error import ModelOperationError

__all__: list[str] = [
    "ModelCheckExistConfig",
    "ModelFileOperationResult",
    "ModelHandledFault",
    "ModelOperationError",
]
