"""
Tests for the run configuration model.
"""

import pytest

from command_executor.config import (
    ENV_EXECUTOR,
    ENV_LOG_LEVEL,
    ENV_SHELL,
    ExecutorConfig,
    load_config,
)
from command_executor.exceptions import CompatibilityError, ConfigError
from command_executor.services.command_execution.shell_types import (
    ExecutorType,
    ShellType,
)


class TestExecutorConfig:
    """Test configuration parsing and validation."""

    def test_defaults(self) -> None:
        config = ExecutorConfig(action="info")

        assert config.log_level == "ERROR"
        assert config.shell_type == ShellType.AUTO
        assert config.executor_type == ExecutorType.BASE64
        assert config.args == []

    def test_lenient_parsing(self) -> None:
        config = ExecutorConfig(
            action="execute", shell_type="PS1", executor_type="unknown", log_level="debug"
        )

        assert config.shell_type == ShellType.POWERSHELL
        assert config.executor_type == ExecutorType.BASE64
        assert config.log_level == "DEBUG"

    def test_unknown_shell_falls_back_to_auto(self) -> None:
        assert ExecutorConfig(shell_type="zsh").shell_type == ShellType.AUTO

    def test_get_command_joins_arguments(self) -> None:
        config = ExecutorConfig(action="execute", args=["echo", "Hello", "World"])
        assert config.get_command() == "echo Hello World"

    def test_get_command_empty(self) -> None:
        assert ExecutorConfig(action="execute").get_command() == ""

    @pytest.mark.parametrize(
        "action,args",
        [("execute", []), ("execute", ["whoami"]), ("encode", ["dir"]),
         ("decode", ["ZGly"]), ("info", [])],
    )
    def test_valid_actions(self, action: str, args: list) -> None:
        ExecutorConfig(action=action, args=args).validate_action()

    @pytest.mark.parametrize("action", ["encode", "decode"])
    def test_missing_argument(self, action: str) -> None:
        with pytest.raises(ConfigError, match="usage"):
            ExecutorConfig(action=action).validate_action()

    def test_unknown_action(self) -> None:
        with pytest.raises(ConfigError, match="unknown action: run"):
            ExecutorConfig(action="run").validate_action()

    def test_incompatible_pair_checked_first(self) -> None:
        config = ExecutorConfig(
            action="bogus", executor_type="base64", shell_type="cmd"
        )
        with pytest.raises(CompatibilityError):
            config.validate_action()

    def test_help_skips_validation(self) -> None:
        ExecutorConfig(help=True, executor_type="base64", shell_type="cmd").validate_action()


class TestLoadConfig:
    """Test building configuration from flags and environment."""

    def test_no_action(self) -> None:
        with pytest.raises(ConfigError, match="no action specified"):
            load_config(environ={})

    def test_help_without_action(self) -> None:
        assert load_config(help=True, environ={}).help is True

    def test_environment_defaults(self) -> None:
        config = load_config(
            action="info",
            environ={ENV_LOG_LEVEL: "DEBUG", ENV_SHELL: "sh", ENV_EXECUTOR: "plain"},
        )

        assert config.log_level == "DEBUG"
        assert config.shell_type == ShellType.SH
        assert config.executor_type == ExecutorType.PLAIN

    def test_flags_override_environment(self) -> None:
        config = load_config(
            shell="powershell",
            executor="base64",
            action="info",
            environ={ENV_SHELL: "sh", ENV_EXECUTOR: "plain"},
        )

        assert config.shell_type == ShellType.POWERSHELL
        assert config.executor_type == ExecutorType.BASE64

    def test_arguments_copied(self) -> None:
        args = ["echo", "hi"]
        config = load_config(action="execute", args=args, environ={})
        args.append("changed")

        assert config.args == ["echo", "hi"]
