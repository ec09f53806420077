"""
Platform service for getting the platform name and architecture.
"""

import platform
from dataclasses import dataclass

from command_executor.protocols.platform_protocols import PlatformServiceProtocol

UNIX_PLATFORMS = ("linux", "darwin", "freebsd", "openbsd")

_ARCHITECTURE_ALIASES = {
    "x86_64": "amd64",
    "aarch64": "arm64",
    "i386": "386",
    "i686": "386",
}


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of the host operating system and CPU architecture."""

    os: str
    arch: str


class PlatformService(PlatformServiceProtocol):
    """
    Platform service backed by the standard library ``platform`` module.
    """

    def get_platform_name(self) -> str:
        """
        Get the platform name for logging and shell selection.

        Returns:
            Platform name: 'windows', 'linux', 'darwin', ...
        """
        return platform.system().lower()

    def get_architecture(self) -> str:
        machine = platform.machine().lower()
        return _ARCHITECTURE_ALIASES.get(machine, machine)

    def get_system_info(self) -> SystemInfo:
        return SystemInfo(os=self.get_platform_name(), arch=self.get_architecture())

    def is_windows(self) -> bool:
        """
        Check if running on Windows.

        Returns:
            True if running on Windows
        """
        return self.get_platform_name() == "windows"

    def is_linux(self) -> bool:
        """
        Check if running on Linux.

        Returns:
            True if running on Linux
        """
        return self.get_platform_name() == "linux"

    def is_unix(self) -> bool:
        return self.get_platform_name() in UNIX_PLATFORMS
