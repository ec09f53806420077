"""
Test configuration and fixtures
"""

import io
import logging
from typing import Generator
from unittest.mock import Mock, patch

import pytest

from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.platform.platform_service import SystemInfo
from command_executor.utils.logging_utils import create_logger

RUN_PATH = "command_executor.services.command_execution.process_runner.subprocess.run"


def make_platform(name: str, arch: str = "amd64") -> Mock:
    platform_service = Mock(spec=PlatformServiceProtocol)
    platform_service.get_platform_name.return_value = name
    platform_service.get_architecture.return_value = arch
    platform_service.get_system_info.return_value = SystemInfo(os=name, arch=arch)
    platform_service.is_windows.return_value = name == "windows"
    platform_service.is_linux.return_value = name == "linux"
    platform_service.is_unix.return_value = name in ("linux", "darwin")
    return platform_service


@pytest.fixture
def windows_platform() -> Mock:
    """Platform service reporting a Windows host."""
    return make_platform("windows")


@pytest.fixture
def linux_platform() -> Mock:
    """Platform service reporting a Linux host."""
    return make_platform("linux")


@pytest.fixture
def mock_run() -> Generator[Mock, None, None]:
    """Patch process spawning so no real shell is started."""
    with patch(RUN_PATH) as run:
        run.return_value = Mock(returncode=0)
        yield run


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_logger(log_stream: io.StringIO) -> logging.Logger:
    """Debug-level logger writing uncolored records to log_stream."""
    return create_logger(
        "DEBUG", stream=log_stream, use_color=False, name="command_executor.test"
    )
