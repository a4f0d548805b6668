# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""File Connector CLI Commands.

Runs connector operations from the command line against connections
declared in a YAML file.

Usage:
    ```bash
    # Result document on stdout
    file-connector check-exist --config connections.yaml \\
        --connection local-archive --path reports/summary.csv

    # Result as NAME=value
    file-connector check-exist --connection local-archive \\
        --path reports/summary.csv --property exists

    # Config path from the environment
    export FILE_CONNECTOR_CONFIG=/etc/file-connector/connections.yaml
    ```

Environment:
    FILE_CONNECTOR_CONFIG: Default for --config
    FILE_CONNECTOR_LOG_LEVEL: Logging level (default: WARNING)
"""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.markup import escape

from file_connector.connection import ConnectionHandler, load_connection_configs
from file_connector.enums import EnumResultDestination
from file_connector.errors import InvalidConfigurationError
from file_connector.message_context import MessageContext
from file_connector.models.model_check_exist_config import (
    CONNECTION_NAME_PARAM,
    INCLUDE_RESULT_TO_PARAM,
    PATH_PARAM,
    RESULT_PROPERTY_NAME_PARAM,
)
from file_connector.operations import CheckFileExist

console = Console()
err_console = Console(stderr=True)

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@click.group()
def cli() -> None:
    """File connector CLI."""


@cli.command("check-exist")
@click.option(
    "--config",
    "config_path",
    envvar="FILE_CONNECTOR_CONFIG",
    required=True,
    type=click.Path(dir_okay=False),
    help="Connections YAML file (default: FILE_CONNECTOR_CONFIG)",
)
@click.option(
    "--connection",
    "connection_name",
    required=True,
    help="Name of the connection to check against",
)
@click.option(
    "--path",
    "path",
    required=True,
    help="Path relative to the connection's working directory",
)
@click.option(
    "--property",
    "property_name",
    default=None,
    help="Report the result as PROPERTY=value instead of a result document",
)
def check_exist_cmd(
    config_path: str,
    connection_name: str,
    path: str,
    property_name: str | None,
) -> None:
    """Check whether a file or directory exists on a connection."""
    try:
        handler = ConnectionHandler.from_configs(load_connection_configs(config_path))
    except InvalidConfigurationError as e:
        err_console.print(
            f"[bold red]Configuration error:[/bold red] {escape(str(e))}"
        )
        raise SystemExit(1) from e

    try:
        destination = (
            EnumResultDestination.MESSAGE_PROPERTY
            if property_name is not None
            else EnumResultDestination.MESSAGE_BODY
        )
        message_context = MessageContext(
            {
                CONNECTION_NAME_PARAM: connection_name,
                PATH_PARAM: path,
                INCLUDE_RESULT_TO_PARAM: destination.value,
                RESULT_PROPERTY_NAME_PARAM: property_name,
            }
        )
        result = CheckFileExist(handler).connect(message_context)
    finally:
        handler.shutdown_connections()

    if result.success and property_name is not None:
        console.print(
            f"{property_name}={message_context.get_property(property_name)}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(
            message_context.body_as_string(),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    raise SystemExit(0 if result.success else 1)


def _configure_logging() -> None:
    log_level = os.getenv("FILE_CONNECTOR_LOG_LEVEL", "WARNING").upper()
    if log_level not in _VALID_LOG_LEVELS:
        err_console.print(
            f"Warning: Invalid FILE_CONNECTOR_LOG_LEVEL '{log_level}', using WARNING. "
            f"Valid levels: {', '.join(sorted(_VALID_LOG_LEVELS))}",
            markup=False,
        )
        log_level = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> None:
    """Entry point for the file-connector CLI."""
    _configure_logging()
    cli()


__all__ = ["cli", "main"]
