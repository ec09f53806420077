"""
Plain command executor that runs plaintext commands through a shell.
"""

import logging
from typing import Optional

from command_executor.protocols.command_protocols import CommandExecutorProtocol
from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.platform.platform_service import PlatformService
from command_executor.utils.logging_utils import get_module_logger
from .process_runner import run_invocation
from .shell_resolver import build_shell_invocation
from .shell_types import ShellType


def default_plain_command(platform_service: PlatformServiceProtocol) -> str:
    """Command run when none is given: ipconfig on Windows, ifconfig elsewhere."""
    return "ipconfig" if platform_service.is_windows() else "ifconfig"


class PlainCommandExecutor(CommandExecutorProtocol):
    """Executor for plaintext commands. Encoding and decoding are identity."""

    def __init__(
        self,
        shell_type: ShellType = ShellType.AUTO,
        platform_service: Optional[PlatformServiceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.shell_type = shell_type
        self.platform_service = platform_service or PlatformService()
        self.logger = get_module_logger("executor.plain", logger)
        self.default_command = default_plain_command(self.platform_service)

    def execute_command(self, command: str) -> None:
        if not command:
            command = self.default_command
            self.logger.info(f"Using default plaintext command: {command}")
        else:
            self.logger.info(f"Executing plaintext command: {command}")

        self.run_plaintext(command)

    def run_plaintext(self, command: str) -> None:
        """
        Run a plaintext command through the configured shell.

        Raises:
            ExecutionError: If the process fails to start or exits non-zero
        """
        self.logger.debug(
            f"Executing: {command} (shell: {self.shell_type.value})"
        )
        invocation = build_shell_invocation(
            command, self.shell_type, False, self.platform_service
        )
        run_invocation(invocation, self.logger)

    def encode_command(self, command: str) -> str:
        self.logger.debug("Plain executor - no encoding needed")
        return command

    def decode_command(self, encoded_command: str) -> str:
        self.logger.debug("Plain executor - no decoding needed")
        return encoded_command
