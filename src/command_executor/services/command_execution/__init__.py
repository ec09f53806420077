"""
Command Execution package for plain and base64 command strategies.

This package provides the shell resolver, the base64 codec, the two
execution strategies and a factory for creating them.
"""

from .base64_executor import Base64CommandExecutor
from .command_executor_factory import (
    CommandExecutorFactory,
    resolve_shell_for_executor,
)
from .compatibility import validate_executor_shell_compatibility
from .plain_executor import PlainCommandExecutor
from .shell_resolver import ShellInvocation, build_shell_invocation
from .shell_types import ExecutorType, ShellType

__all__ = [
    "Base64CommandExecutor",
    "CommandExecutorFactory",
    "ExecutorType",
    "PlainCommandExecutor",
    "ShellInvocation",
    "ShellType",
    "build_shell_invocation",
    "resolve_shell_for_executor",
    "validate_executor_shell_compatibility",
]
