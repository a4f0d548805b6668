# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ConnectionHandler.

Test Classes:
    - TestConnectionHandlerRegistry: Registration, lookup, replacement
    - TestConnectionHandlerBackends: Backend factory registration
    - TestConnectionHandlerShutdown: Connection shutdown
"""

from __future__ import annotations

import logging

import pytest

from file_connector.connection import (
    ConnectionHandler,
    HandlerLocalFileSystem,
    ModelFileSystemConnectionConfig,
)
from file_connector.enums import EnumFileErrorCode, EnumFileSystemProtocol
from file_connector.errors import (
    ConnectionNotFoundError,
    FileOperationError,
    InvalidConfigurationError,
)
from file_connector.protocols import ProtocolConnectionProvider
from tests.conftest import assert_has_methods
from tests.helpers import FakeFileSystemHandler


class TestConnectionHandlerRegistry:
    """Test suite for registering and looking up connections."""

    def test_conforms_to_connection_provider(self) -> None:
        handler = ConnectionHandler()

        assert_has_methods(
            handler,
            ["get_connection"],
            protocol_name="ProtocolConnectionProvider",
        )
        assert isinstance(handler, ProtocolConnectionProvider)

    def test_get_registered_connection(self) -> None:
        handler = ConnectionHandler()
        connection = FakeFileSystemHandler()

        handler.create_connection("file", "local", connection)

        assert handler.get_connection("file", "local") is connection
        assert handler.check_if_connection_exists("file", "local") is True
        assert len(handler) == 1

    def test_get_unknown_connection_raises(self) -> None:
        handler = ConnectionHandler()

        with pytest.raises(ConnectionNotFoundError) as exc_info:
            handler.get_connection("file", "missing")

        assert "missing" in str(exc_info.value)
        assert exc_info.value.error_code == EnumFileErrorCode.INVALID_CONFIGURATION
        assert exc_info.value.correlation_id is not None

    def test_connections_scoped_by_connector_name(self) -> None:
        handler = ConnectionHandler()
        handler.create_connection("file", "local", FakeFileSystemHandler())

        assert handler.check_if_connection_exists("ftp", "local") is False
        with pytest.raises(ConnectionNotFoundError):
            handler.get_connection("ftp", "local")

    def test_replacing_connection_closes_previous(self) -> None:
        handler = ConnectionHandler()
        first = FakeFileSystemHandler()
        second = FakeFileSystemHandler()

        handler.create_connection("file", "local", first)
        handler.create_connection("file", "local", second)

        assert first.connection_closed is True
        assert second.connection_closed is False
        assert handler.get_connection("file", "local") is second

    def test_from_configs_registers_local_connections(self) -> None:
        handler = ConnectionHandler.from_configs(
            [
                ModelFileSystemConnectionConfig(name="a", working_directory="/a/"),
                ModelFileSystemConnectionConfig(name="b", working_directory="/b/"),
            ]
        )

        connection = handler.get_connection("file", "b")
        assert isinstance(connection, HandlerLocalFileSystem)
        assert connection.base_directory_path == "/b/"
        assert len(handler) == 2

    def test_from_configs_shuts_down_on_failure(self) -> None:
        built: list[FakeFileSystemHandler] = []

        def factory(config: ModelFileSystemConnectionConfig) -> FakeFileSystemHandler:
            built.append(FakeFileSystemHandler())
            return built[-1]

        class BucketConnectionHandler(ConnectionHandler):
            def __init__(self) -> None:
                super().__init__()
                self.register_backend(EnumFileSystemProtocol.S3, factory)

        with pytest.raises(InvalidConfigurationError):
            BucketConnectionHandler.from_configs(
                [
                    ModelFileSystemConnectionConfig(
                        name="bucket", protocol=EnumFileSystemProtocol.S3
                    ),
                    ModelFileSystemConnectionConfig(
                        name="partner", protocol=EnumFileSystemProtocol.SFTP
                    ),
                ]
            )

        assert len(built) == 1
        assert built[0].connection_closed is True


class TestConnectionHandlerBackends:
    """Test suite for backend factory registration."""

    def test_unregistered_protocol_raises(self) -> None:
        handler = ConnectionHandler()
        config = ModelFileSystemConnectionConfig(
            name="partner", protocol=EnumFileSystemProtocol.SFTP
        )

        with pytest.raises(InvalidConfigurationError) as exc_info:
            handler.create_connection_from_config(config)

        assert "sftp" in str(exc_info.value)
        assert handler.check_if_connection_exists("file", "partner") is False

    def test_registered_backend_builds_connection(self) -> None:
        handler = ConnectionHandler()
        built: list[ModelFileSystemConnectionConfig] = []

        def factory(config: ModelFileSystemConnectionConfig) -> FakeFileSystemHandler:
            built.append(config)
            return FakeFileSystemHandler(base_directory_path=config.working_directory)

        handler.register_backend(EnumFileSystemProtocol.S3, factory)
        connection = handler.create_connection_from_config(
            ModelFileSystemConnectionConfig(
                name="bucket",
                protocol=EnumFileSystemProtocol.S3,
                working_directory="s3://bucket/",
            )
        )

        assert built[0].name == "bucket"
        assert handler.get_connection("file", "bucket") is connection
        assert connection.base_directory_path == "s3://bucket/"

    def test_custom_connector_name(self) -> None:
        handler = ConnectionHandler()

        handler.create_connection_from_config(
            ModelFileSystemConnectionConfig(name="local"), connector_name="archive"
        )

        assert handler.check_if_connection_exists("archive", "local") is True
        assert handler.check_if_connection_exists("file", "local") is False


class TestConnectionHandlerShutdown:
    """Test suite for shutting down connections."""

    def test_shutdown_closes_and_removes_all(self) -> None:
        handler = ConnectionHandler()
        first = FakeFileSystemHandler()
        second = FakeFileSystemHandler()
        handler.create_connection("file", "a", first)
        handler.create_connection("ftp", "b", second)

        handler.shutdown_connections()

        assert first.connection_closed is True
        assert second.connection_closed is True
        assert len(handler) == 0

    def test_shutdown_single_connector(self) -> None:
        handler = ConnectionHandler()
        first = FakeFileSystemHandler()
        second = FakeFileSystemHandler()
        handler.create_connection("file", "a", first)
        handler.create_connection("ftp", "b", second)

        handler.shutdown_connections("file")

        assert first.connection_closed is True
        assert second.connection_closed is False
        assert handler.check_if_connection_exists("ftp", "b") is True

    def test_shutdown_logs_close_failures(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        class FailingConnection(FakeFileSystemHandler):
            def close(self) -> None:
                raise FileOperationError("close failed")

        handler = ConnectionHandler()
        healthy = FakeFileSystemHandler()
        handler.create_connection("file", "broken", FailingConnection())
        handler.create_connection("file", "healthy", healthy)

        with caplog.at_level(logging.ERROR):
            handler.shutdown_connections()

        assert healthy.connection_closed is True
        assert len(handler) == 0
        assert any(
            "Error while closing file connection" in r.getMessage()
            for r in caplog.records
        )

    def test_shutdown_logs_unexpected_close_errors(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        class BrokenConnection(FakeFileSystemHandler):
            def close(self) -> None:
                raise RuntimeError("pool broken")

        handler = ConnectionHandler()
        healthy = FakeFileSystemHandler()
        handler.create_connection("file", "broken", BrokenConnection())
        handler.create_connection("file", "healthy", healthy)

        with caplog.at_level(logging.ERROR):
            handler.shutdown_connections()

        assert healthy.connection_closed is True
        assert len(handler) == 0
        assert any(
            getattr(r, "error_type", None) == "RuntimeError" for r in caplog.records
        )
