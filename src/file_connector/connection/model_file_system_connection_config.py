# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File System Connection Configuration Model.

Pydantic model describing one named file connection, as declared in the
connections YAML file.

Example YAML:
    ```yaml
    connections:
      - name: local-archive
        protocol: local
        working_directory: /srv/archive/
    ```
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from file_connector.enums import EnumFileSystemProtocol


class ModelFileSystemConnectionConfig(BaseModel):
    """Configuration for a named file system connection.

    Attributes:
        name: Connection name operations refer to via the ``name`` parameter
        protocol: Storage backend protocol (default: local)
        working_directory: Base directory prefix, used verbatim

    Note:
        working_directory is not normalised. Operations concatenate it with
        caller paths textually, so include a trailing separator when callers
        pass bare relative paths.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        min_length=1,
        description="Connection name operations refer to",
    )
    protocol: EnumFileSystemProtocol = Field(
        default=EnumFileSystemProtocol.LOCAL,
        description="Storage backend protocol",
    )
    working_directory: str = Field(
        default="",
        description="Base directory prefix, used verbatim",
    )


__all__: list[str] = ["ModelFileSystemConnectionConfig"]
