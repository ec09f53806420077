"""
Platform service protocols.

This module defines the interface used to identify the host operating
system and CPU architecture.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from command_executor.services.platform.platform_service import SystemInfo


class PlatformServiceProtocol(ABC):
    """
    Protocol for platform detection and identification.

    This service provides methods to identify the current platform
    (Windows, Linux, macOS, BSD).
    """

    @abstractmethod
    def get_platform_name(self) -> str:
        """
        Get the platform name for logging and shell selection.

        Returns:
            Platform name: 'windows', 'linux', 'darwin', 'freebsd', ...
        """
        pass

    @abstractmethod
    def get_architecture(self) -> str:
        """
        Get the CPU architecture.

        Returns:
            Architecture name, e.g. 'amd64' or 'arm64'
        """
        pass

    @abstractmethod
    def get_system_info(self) -> "SystemInfo":
        """Get a snapshot of the operating system and architecture."""
        pass

    @abstractmethod
    def is_windows(self) -> bool:
        """
        Check if running on Windows.

        Returns:
            True if running on Windows
        """
        pass

    @abstractmethod
    def is_linux(self) -> bool:
        """
        Check if running on Linux.

        Returns:
            True if running on Linux
        """
        pass

    @abstractmethod
    def is_unix(self) -> bool:
        """
        Check if running on a Unix-like system.

        Returns:
            True for Linux, macOS, FreeBSD and OpenBSD
        """
        pass
