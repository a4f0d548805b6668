# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File System Protocol Enumeration.

Defines the storage backend protocols a file connection may be configured
with. Used for connection configuration, backend factory lookup, and error
context.
"""

from enum import Enum


class EnumFileSystemProtocol(str, Enum):
    """Storage backend protocols for file connections.

    Only LOCAL ships with a bundled backend. The remaining protocols are
    accepted in configuration and resolved through factories registered on
    the ConnectionHandler by the host.

    Attributes:
        LOCAL: Local disk
        FTP: Plain FTP
        FTPS: FTP over TLS
        SFTP: SSH file transfer
        S3: Amazon S3 compatible object storage
    """

    LOCAL = "local"
    FTP = "ftp"
    FTPS = "ftps"
    SFTP = "sftp"
    S3 = "s3"


__all__ = ["EnumFileSystemProtocol"]
