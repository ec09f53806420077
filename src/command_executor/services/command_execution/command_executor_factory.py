"""
Command Executor Factory for creating execution strategies.

The factory binds an executor type and a shell type to a concrete strategy.
It does not override the shell; resolve_shell_for_executor holds the single
platform-aware override and is applied by the caller beforehand.
"""

import logging
from typing import Dict, Optional, Type

from command_executor.protocols.command_protocols import CommandExecutorProtocol
from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.platform.platform_service import PlatformService
from command_executor.utils.logging_utils import get_module_logger
from .base64_executor import Base64CommandExecutor
from .plain_executor import PlainCommandExecutor
from .shell_types import ExecutorType, ShellType

EXECUTOR_IMPLEMENTATIONS: Dict[ExecutorType, Type[CommandExecutorProtocol]] = {
    ExecutorType.BASE64: Base64CommandExecutor,
    ExecutorType.PLAIN: PlainCommandExecutor,
}


def resolve_shell_for_executor(
    executor_type: ExecutorType,
    shell_type: ShellType,
    platform_service: PlatformServiceProtocol,
) -> ShellType:
    """
    Pick the shell an executor should be built with.

    The base64 executor with AUTO on Windows would otherwise resolve to CMD,
    which cannot run encoded payloads, so PowerShell is used instead.

    Returns:
        POWERSHELL for base64/auto on Windows, otherwise shell_type unchanged
    """
    if (
        executor_type == ExecutorType.BASE64
        and shell_type == ShellType.AUTO
        and platform_service.is_windows()
    ):
        return ShellType.POWERSHELL
    return shell_type


class CommandExecutorFactory:
    """Creates command executors that share a logger and platform service."""

    def __init__(
        self,
        platform_service: Optional[PlatformServiceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.platform_service = platform_service or PlatformService()
        self._base_logger = logger
        self.logger = get_module_logger("executor.factory", logger)

    def create_executor(
        self,
        executor_type: ExecutorType,
        shell_type: ShellType = ShellType.AUTO,
    ) -> CommandExecutorProtocol:
        """
        Create an executor for the given executor and shell type.

        Args:
            executor_type: Which strategy to build
            shell_type: Shell the strategy uses for every operation

        Returns:
            CommandExecutorProtocol: The strategy instance
        """
        self.logger.debug(
            f"Creating {executor_type.value} executor (shell: {shell_type.value})"
        )
        implementation = EXECUTOR_IMPLEMENTATIONS[executor_type]
        return implementation(  # type: ignore[call-arg]
            shell_type=shell_type,
            platform_service=self.platform_service,
            logger=self._base_logger,
        )

    def create_default_executor(
        self, shell_type: ShellType = ShellType.AUTO
    ) -> CommandExecutorProtocol:
        """Create the default (base64) executor."""
        return self.create_executor(ExecutorType.BASE64, shell_type)
