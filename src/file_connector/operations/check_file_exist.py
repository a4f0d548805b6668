# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Check File Exist Operation - reports whether a file or directory exists.

Resolves ``base_directory_path + path`` on a pooled connection, asks the
backend whether anything exists there, and writes ``"true"``/``"false"`` to
the message body or a named message property.

Template Parameters:
    - name: Connection name (required)
    - path: Path relative to the connection's base directory (required)
    - includeResultTo: MESSAGE_BODY or MESSAGE_PROPERTY (required)
    - resultPropertyName: Property name (required for MESSAGE_PROPERTY)

Failure Reporting:
    Failures never raise. The failed result is written to the message body
    regardless of includeResultTo, a handled fault is set on the message
    context, and the result is returned.

    | Failure | Error code |
    |---------|------------|
    | Missing/invalid parameter, unknown connection | INVALID_CONFIGURATION |
    | Backend or OS error resolving/querying the path | OPERATION_ERROR |

Resource Handling:
    The resolved file object is closed on every exit path. Close failures
    are logged and do not change the result. The borrowed connection is
    never closed here.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID, uuid4

from file_connector.constants import CONNECTOR_NAME
from file_connector.enums import EnumFileErrorCode, EnumResultDestination
from file_connector.errors import FileConnectorError
from file_connector.models import ModelCheckExistConfig, ModelFileOperationResult
from file_connector.protocols import (
    ProtocolConnectionProvider,
    ProtocolFileObject,
    ProtocolFileSystemHandler,
    ProtocolMessageContext,
)
from file_connector.utils import (
    set_result_as_payload,
    set_result_as_property,
    signal_handled_fault,
)

logger = logging.getLogger(__name__)

OPERATION_NAME = "checkExist"
ERROR_MESSAGE = "Error while performing file:checkExist for file/directory "
FILE_EXISTS_ELE_NAME = "fileExists"

_PATH_SEPARATOR = re.compile(r"[\\/]")


class CheckFileExist:
    """checkExist operation bound to a connection provider.

    Example:
        >>> operation = CheckFileExist(connection_handler)
        >>> ctx = MessageContext({
        ...     "name": "local-archive",
        ...     "path": "reports/summary.csv",
        ...     "includeResultTo": "MESSAGE_BODY",
        ... })
        >>> operation.connect(ctx).result_value
        'true'
    """

    def __init__(
        self,
        connection_provider: ProtocolConnectionProvider,
        connector_name: str = CONNECTOR_NAME,
    ) -> None:
        self._connection_provider = connection_provider
        self._connector_name = connector_name

    def connect(
        self, message_context: ProtocolMessageContext
    ) -> ModelFileOperationResult:
        """Run the existence check against the message context.

        Args:
            message_context: Context supplying template parameters and
                receiving the result.

        Returns:
            The operation result, already routed to the message context.
        """
        correlation_id = uuid4()
        file_path: str | None = None

        try:
            config = ModelCheckExistConfig.from_message_context(
                message_context, correlation_id
            )
            file_path = config.path
            connection = self._connection_provider.get_connection(
                self._connector_name, config.connection_name
            )
            file_path = connection.base_directory_path + config.path
            _warn_on_traversal(config, correlation_id)

            with _resolved_file(connection, file_path, correlation_id) as file_object:
                exists = file_object.exists()

        except FileConnectorError as e:
            return self._fail(
                message_context, e.error_code, e, file_path, correlation_id
            )
        except OSError as e:
            return self._fail(
                message_context,
                EnumFileErrorCode.OPERATION_ERROR,
                e,
                file_path,
                correlation_id,
            )

        result = ModelFileOperationResult.succeeded(
            OPERATION_NAME, FILE_EXISTS_ELE_NAME, str(exists).lower()
        )
        if (
            config.include_result_to == EnumResultDestination.MESSAGE_PROPERTY
            and config.result_property_name
        ):
            set_result_as_property(
                message_context, config.result_property_name, result
            )
        else:
            set_result_as_payload(message_context, result)

        logger.debug(
            "Checked file existence",
            extra={
                "connection_name": config.connection_name,
                "path": file_path,
                "exists": exists,
                "include_result_to": config.include_result_to.value,
                "correlation_id": str(correlation_id),
            },
        )
        return result

    def _fail(
        self,
        message_context: ProtocolMessageContext,
        error_code: EnumFileErrorCode,
        error: Exception,
        file_path: str | None,
        correlation_id: UUID,
    ) -> ModelFileOperationResult:
        error_detail = ERROR_MESSAGE + (
            file_path if file_path is not None else "<not provided>"
        )
        result = ModelFileOperationResult.failed(
            OPERATION_NAME, error_code, str(error)
        )
        set_result_as_payload(message_context, result)

        log_fields: dict[str, object] = (
            error.structured_context() if isinstance(error, FileConnectorError) else {}
        )
        log_fields.update(
            operation=OPERATION_NAME,
            error_code=error_code.value,
            error_type=type(error).__name__,
            correlation_id=str(correlation_id),
        )
        logger.error("%s", error_detail, exc_info=error, extra=log_fields)
        signal_handled_fault(
            message_context,
            error_code=error_code,
            message=error_detail,
            cause=str(error),
            correlation_id=correlation_id,
        )
        return result


@contextmanager
def _resolved_file(
    connection: ProtocolFileSystemHandler, file_path: str, correlation_id: UUID
) -> Iterator[ProtocolFileObject]:
    """Resolve ``file_path`` and close the file object when the block exits."""
    file_object = connection.resolve_file(file_path)
    try:
        yield file_object
    finally:
        try:
            file_object.close()
        except Exception as e:
            # Release failures never replace the operation outcome.
            logger.exception(
                "%s:Error while closing file object %s",
                CONNECTOR_NAME,
                file_object,
                extra={
                    "error_type": type(e).__name__,
                    "correlation_id": str(correlation_id),
                },
            )


def _warn_on_traversal(config: ModelCheckExistConfig, correlation_id: UUID) -> None:
    # Paths are concatenated verbatim; parent segments are reported, not removed.
    if ".." in _PATH_SEPARATOR.split(config.path):
        logger.warning(
            "Path contains parent directory segments and is used unsanitised",
            extra={
                "connection_name": config.connection_name,
                "path": config.path,
                "correlation_id": str(correlation_id),
            },
        )


__all__: list[str] = [
    "CheckFileExist",
    "ERROR_MESSAGE",
    "FILE_EXISTS_ELE_NAME",
    "OPERATION_NAME",
]
