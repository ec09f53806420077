"""
Base64 command executor.

PowerShell and sh decode the payload themselves; any other shell gets the
payload decoded locally and run as plaintext.
"""

import logging
from typing import Optional

from command_executor.exceptions import DecodeError, ExecutionError
from command_executor.protocols.command_protocols import CommandExecutorProtocol
from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.platform.platform_service import PlatformService
from command_executor.utils.logging_utils import get_module_logger
from . import codec
from .plain_executor import default_plain_command
from .process_runner import run_invocation
from .shell_resolver import build_shell_invocation
from .shell_types import ShellType

NATIVE_BASE64_SHELLS = (ShellType.POWERSHELL, ShellType.SH)


class Base64CommandExecutor(CommandExecutorProtocol):
    """Executor for base64 encoded commands."""

    def __init__(
        self,
        shell_type: ShellType = ShellType.AUTO,
        platform_service: Optional[PlatformServiceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the base64 executor.

        Args:
            shell_type: Shell used for every operation of this executor
            platform_service: Platform used for AUTO and the default command
            logger: Logger shared with the rest of the run
        """
        self.shell_type = shell_type
        self.platform_service = platform_service or PlatformService()
        self.logger = get_module_logger("executor.base64", logger)
        self.default_command = self.encode_command(
            default_plain_command(self.platform_service)
        )

    def execute_command(self, command: str) -> None:
        """
        Execute a base64 encoded command.

        Args:
            command: Base64 payload; the encoded default is used when empty

        Raises:
            ExecutionError: If a locally decoded payload is invalid, or the process
                fails to start or exits non-zero
        """
        if not command:
            command = self.default_command
            self.logger.info("Using default base64 command")
        else:
            self.logger.info("Executing base64 command")
        self.logger.debug(f"Executing base64 command (shell: {self.shell_type.value})")

        if self.shell_type in NATIVE_BASE64_SHELLS:
            self._execute_direct(command)
            return

        try:
            decoded = self.decode_command(command)
        except DecodeError as e:
            self.logger.error(f"Failed to decode base64: {e}")
            raise ExecutionError(str(e)) from e

        self.logger.debug(f"Executing: {decoded}")
        invocation = build_shell_invocation(
            decoded, self.shell_type, False, self.platform_service
        )
        run_invocation(invocation, self.logger)

    def _execute_direct(self, encoded_command: str) -> None:
        self.logger.debug(f"Executing base64 directly (shell: {self.shell_type.value})")
        invocation = build_shell_invocation(
            encoded_command, self.shell_type, True, self.platform_service
        )
        run_invocation(invocation, self.logger, label="Base64 command")

    def encode_command(self, command: str) -> str:
        return codec.encode_command(command, self.shell_type)

    def decode_command(self, encoded_command: str) -> str:
        return codec.decode_command(encoded_command)
