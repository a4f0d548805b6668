# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector Enumerations Module.

Exports:
    EnumFileErrorCode: Closed error category enumeration (INVALID_CONFIGURATION, OPERATION_ERROR)
    EnumFileSystemProtocol: Storage backend protocol enumeration (LOCAL, FTP, FTPS, SFTP, S3)
    EnumResultDestination: Result routing destination (MESSAGE_BODY, MESSAGE_PROPERTY)
"""

from file_connector.enums.enum_file_error_code import EnumFileErrorCode
from file_connector.enums.enum_file_system_protocol import EnumFileSystemProtocol
from file_connector.enums.enum_result_destination import EnumResultDestination

__all__: list[str] = [
    "EnumFileErrorCode",
    "EnumFileSystemProtocol",
    "EnumResultDestination",
]
