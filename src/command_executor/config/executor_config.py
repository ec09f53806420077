"""
Resolved run configuration for the command executor.

Values come from command-line flags, with environment variables (optionally
loaded from a .env file) supplying the defaults.
"""

import os
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from command_executor.exceptions import ConfigError
from command_executor.services.command_execution.compatibility import (
    validate_executor_shell_compatibility,
)
from command_executor.services.command_execution.shell_types import (
    ExecutorType,
    ShellType,
    parse_executor_type,
    parse_shell_type,
)

ENV_LOG_LEVEL = "COMMAND_EXECUTOR_LOG_LEVEL"
ENV_SHELL = "COMMAND_EXECUTOR_SHELL"
ENV_EXECUTOR = "COMMAND_EXECUTOR_EXECUTOR"

DEFAULT_LOG_LEVEL = "ERROR"

ACTIONS = ("execute", "encode", "decode", "info")


class ExecutorConfig(BaseModel):
    """Configuration for a single run"""

    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    shell_type: ShellType = Field(default=ShellType.AUTO)
    executor_type: ExecutorType = Field(default=ExecutorType.BASE64)
    help: bool = False
    action: Optional[str] = None
    args: List[str] = Field(default_factory=list)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        return str(v or DEFAULT_LOG_LEVEL).strip().upper()

    @field_validator("shell_type", mode="before")
    @classmethod
    def parse_shell(cls, v: Any) -> ShellType:
        if isinstance(v, ShellType):
            return v
        return parse_shell_type(str(v or ""))

    @field_validator("executor_type", mode="before")
    @classmethod
    def parse_executor(cls, v: Any) -> ExecutorType:
        if isinstance(v, ExecutorType):
            return v
        return parse_executor_type(str(v or ""))

    def validate_action(self) -> None:
        """
        Validate the action and its arguments.

        Raises:
            CompatibilityError: If executor and shell cannot be combined
            ConfigError: If the action is unknown or missing an argument
        """
        if self.help:
            return

        validate_executor_shell_compatibility(self.executor_type, self.shell_type)

        if not self.action:
            raise ConfigError("no action specified")

        if self.action in ("execute", "info"):
            return
        if self.action == "encode":
            if not self.args:
                raise ConfigError("usage: command-executor encode <command>")
            return
        if self.action == "decode":
            if not self.args:
                raise ConfigError(
                    "usage: command-executor decode <base64-encoded-command>"
                )
            return

        raise ConfigError(f"unknown action: {self.action}")

    def get_command(self) -> str:
        """Return the command arguments joined by spaces, empty if none were given."""
        return " ".join(self.args)


def load_config(
    log_level: Optional[str] = None,
    shell: Optional[str] = None,
    executor: Optional[str] = None,
    help: bool = False,
    action: Optional[str] = None,
    args: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ExecutorConfig:
    """
    Build an ExecutorConfig, filling unset flags from the environment.

    Args:
        log_level: Value of the log level flag, if given
        shell: Value of the shell flag, if given
        executor: Value of the executor flag, if given
        help: Whether help was requested
        action: Action name
        args: Positional arguments after the action
        environ: Environment mapping, os.environ by default

    Returns:
        ExecutorConfig for the run
    """
    env = os.environ if environ is None else environ

    if not help and not action:
        raise ConfigError("no action specified")

    return ExecutorConfig(
        log_level=log_level or env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
        shell_type=shell or env.get(ENV_SHELL) or ShellType.AUTO,
        executor_type=executor or env.get(ENV_EXECUTOR) or ExecutorType.BASE64,
        help=help,
        action=action,
        args=list(args or []),
    )
