"""
Exception types raised by the command executor.
"""

from typing import List, Optional


class CommandExecutorError(Exception):
    """Base class for all command executor errors."""


class ConfigError(CommandExecutorError, ValueError):
    """Raised when the action or its arguments are missing or invalid."""


class CompatibilityError(ConfigError):
    """Raised when an executor type cannot be used with a shell type."""


class DecodeError(CommandExecutorError, ValueError):
    """Raised when a base64 payload cannot be decoded to text."""


class ExecutionError(CommandExecutorError, RuntimeError):
    """Raised when a child process fails to start or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        return_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.command = command or []
        self.return_code = return_code
