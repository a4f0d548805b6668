# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection Configuration Loader.

Loads named file connection definitions from a YAML file.

File Structure:
    ```yaml
    connections:
      - name: local-archive
        protocol: local
        working_directory: /srv/archive/
      - name: partner-drop
        protocol: sftp
        working_directory: /inbound/
    ```

The loader validates:
- File existence and size
- YAML syntax validity
- Top-level mapping with a ``connections`` list
- Each entry against ModelFileSystemConnectionConfig
- Unique connection names

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from file_connector.connection.model_file_system_connection_config import (
    ModelFileSystemConnectionConfig,
)
from file_connector.errors import (
    InvalidConfigurationError,
    ModelConnectorErrorContext,
)

logger = logging.getLogger(__name__)

# Maximum connections file size (1 MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def load_connection_configs(
    config_path: str | Path,
) -> list[ModelFileSystemConnectionConfig]:
    """Load and validate connection definitions from a YAML file.

    Args:
        config_path: Path to the connections YAML file.

    Returns:
        Validated connection configs in file order.

    Raises:
        InvalidConfigurationError: If the file is missing or too large, the
            YAML is invalid, the structure is wrong, an entry fails
            validation, or a connection name is repeated.
    """
    path = Path(config_path)
    ctx = ModelConnectorErrorContext.with_correlation(
        operation="load_connection_configs",
        target_name=str(path),
    )

    if not path.is_file():
        raise InvalidConfigurationError(
            f"Connection config file not found: {path}", context=ctx
        )

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise InvalidConfigurationError(
            f"Connection config file too large: {file_size} bytes "
            f"(max {MAX_CONFIG_SIZE_BYTES})",
            context=ctx,
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            f"Invalid YAML in connection config: {e}", context=ctx
        ) from e

    if not isinstance(raw, dict):
        raise InvalidConfigurationError(
            f"Connection config must be a mapping, got {type(raw).__name__}",
            context=ctx,
        )

    entries = raw.get("connections")
    if not isinstance(entries, list):
        raise InvalidConfigurationError(
            "Connection config requires a 'connections' list", context=ctx
        )

    configs: list[ModelFileSystemConnectionConfig] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            config = ModelFileSystemConnectionConfig.model_validate(entry)
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid connection at index {index}: {e}", context=ctx
            ) from e
        if config.name in seen:
            raise InvalidConfigurationError(
                f"Duplicate connection name '{config.name}'", context=ctx
            )
        seen.add(config.name)
        configs.append(config)

    logger.debug(
        "Loaded connection configs",
        extra={
            "config_path": str(path),
            "connection_count": len(configs),
            "correlation_id": str(ctx.correlation_id),
        },
    )
    return configs


__all__: list[str] = ["MAX_CONFIG_SIZE_BYTES", "load_connection_configs"]
