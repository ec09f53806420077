"""
Command-line entry point for the command executor.

Flags must come before the action; everything after the action is treated
as the command.
"""

import argparse
import os
import sys
from typing import List, NoReturn, Optional

from dotenv import load_dotenv

from command_executor.config import (
    ENV_EXECUTOR,
    ENV_SHELL,
    ExecutorConfig,
    load_config,
)
from command_executor.exceptions import CommandExecutorError, ConfigError
from command_executor.protocols.command_protocols import CommandExecutorProtocol
from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.command_execution import (
    CommandExecutorFactory,
    resolve_shell_for_executor,
)
from command_executor.services.command_execution.shell_types import (
    is_known_executor_type,
    is_known_shell_type,
)
from command_executor.services.platform.platform_service import PlatformService
from command_executor.utils.logging_utils import (
    ModuleLogger,
    create_logger,
    get_module_logger,
)

PROG = "command-executor"

USAGE = f"""Command Executor
Usage:
  {PROG} [flags] <action> [arguments]

Flags:
  -log-level string    Set logging level (DEBUG, INFO, WARN, ERROR, FATAL) (default "ERROR")
  -shell string        Set shell type (auto, cmd, powershell, sh) (default "auto")
  -executor string     Set executor type (base64, plain) (default "base64")
  -help                Show help information

Actions:
  execute [command]                 - Execute command using specified executor (uses default if no command)
  encode <command>                  - Encode command to base64
  decode <base64-command>           - Decode base64 command
  info                              - Show system information

Executor Types:
  base64     - Execute base64 encoded command (default)
             - Compatible with: powershell, sh
             - NOT compatible with: cmd
  plain      - Execute plaintext command directly
             - Compatible with: cmd, powershell, sh

Shell Types:
  auto        - Automatically choose based on OS (default)
  cmd         - Windows Command Prompt
  powershell  - Windows PowerShell
  sh          - Linux/Unix Sh

Environment:
  COMMAND_EXECUTOR_LOG_LEVEL, COMMAND_EXECUTOR_SHELL, COMMAND_EXECUTOR_EXECUTOR
  override the flag defaults (a .env file is read if present).

Examples:
  {PROG} -executor plain execute                    # Use default plain command
  {PROG} -executor base64 execute                   # Use default base64 command
  {PROG} -executor plain execute "echo Hello World"
  {PROG} -executor base64 execute "ZWNobyBIZWxsbyBXb3JsZA=="
  {PROG} encode "dir"
  {PROG} decode "ZGly"
  {PROG} info
  {PROG} -log-level DEBUG -executor plain execute
  {PROG} -shell powershell -executor plain execute
  {PROG} -shell cmd -executor plain execute

Compatibility Matrix:
  Plain Executor:  cmd, powershell, sh
  Base64 Executor: powershell, sh

Note: Flags must come BEFORE the action, not after the command!
  Correct: {PROG} -log-level DEBUG execute "whoami"
  Wrong:   {PROG} execute "whoami" -log-level DEBUG"""


class CommandLineParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> CommandLineParser:
    parser = CommandLineParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-log-level", "--log-level", dest="log_level")
    parser.add_argument("-shell", "--shell", dest="shell")
    parser.add_argument("-executor", "--executor", dest="executor")
    parser.add_argument("-help", "--help", "-h", dest="help", action="store_true")
    parser.add_argument("action", nargs="?")
    parser.add_argument("arguments", nargs=argparse.REMAINDER)
    return parser


def parse_config(namespace: argparse.Namespace) -> ExecutorConfig:
    """
    Turn parsed arguments into an ExecutorConfig.

    Raises:
        ConfigError: If no action is given
    """
    return load_config(
        log_level=namespace.log_level,
        shell=namespace.shell,
        executor=namespace.executor,
        help=namespace.help,
        action=namespace.action,
        args=namespace.arguments,
    )


def print_usage() -> None:
    print(USAGE)


def print_system_info(platform_service: PlatformServiceProtocol) -> None:
    info = platform_service.get_system_info()
    print("System Information:")
    print(f"  OS: {info.os}")
    print(f"  Architecture: {info.arch}")
    print(f"  Is Windows: {str(platform_service.is_windows()).lower()}")
    print(f"  Is Linux: {str(platform_service.is_linux()).lower()}")
    print(f"  Is Unix-like: {str(platform_service.is_unix()).lower()}")


def run_action(
    config: ExecutorConfig,
    executor: CommandExecutorProtocol,
    platform_service: PlatformServiceProtocol,
    logger: ModuleLogger,
) -> int:
    """
    Run the configured action once.

    Returns:
        Process exit code

    Raises:
        ConfigError: If the action is not one of execute, encode, decode, info
    """
    action = config.action

    if action == "execute":
        command = config.get_command()
        logger.debug(f"Executing command: {command}")
        try:
            executor.execute_command(command)
        except CommandExecutorError as e:
            logger.error(f"Error executing command: {e}")
            return 1
        return 0

    if action == "encode":
        command = config.get_command()
        logger.debug(f"Encoding command: {command}")
        encoded = executor.encode_command(command)
        print(f"Base64 encoded command: {encoded}")
        logger.info("Command encoded successfully")
        return 0

    if action == "decode":
        encoded = config.get_command()
        logger.debug(f"Decoding command: {encoded}")
        try:
            decoded = executor.decode_command(encoded)
        except CommandExecutorError as e:
            logger.error(f"Error decoding: {e}")
            return 1
        print(f"Decoded command: {decoded}")
        logger.info("Command decoded successfully")
        return 0

    if action == "info":
        logger.info("Displaying system information")
        print_system_info(platform_service)
        return 0

    raise ConfigError(f"unknown action: {action}")


def warn_unknown_values(
    namespace: argparse.Namespace, logger: ModuleLogger
) -> None:
    """Log a warning for shell or executor names that fall back to a default."""
    shell = namespace.shell or os.environ.get(ENV_SHELL)
    if shell and not is_known_shell_type(shell):
        logger.warning(f"Unknown shell type '{shell}', using auto")

    executor = namespace.executor or os.environ.get(ENV_EXECUTOR)
    if executor and not is_known_executor_type(executor):
        logger.warning(f"Unknown executor type '{executor}', using base64")


def main(
    argv: Optional[List[str]] = None,
    platform_service: Optional[PlatformServiceProtocol] = None,
) -> int:
    """
    Run the command executor.

    Args:
        argv: Command-line arguments without the program name
        platform_service: Platform service, the host platform by default

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    load_dotenv()

    try:
        namespace = build_parser().parse_args(argv)
        config = parse_config(namespace)
    except ConfigError as e:
        print(f"Error: {e}")
        print_usage()
        return 1

    base_logger = create_logger(config.log_level)
    logger = get_module_logger("main", base_logger)
    config_logger = get_module_logger("config", base_logger)
    warn_unknown_values(namespace, config_logger)

    if config.help:
        print_usage()
        return 0

    try:
        config.validate_action()
    except ConfigError as e:
        logger.error(str(e))
        print_usage()
        return 1

    logger.info("Starting Command Executor")

    platform_service = platform_service or PlatformService()
    shell_type = resolve_shell_for_executor(
        config.executor_type, config.shell_type, platform_service
    )
    if shell_type != config.shell_type:
        config_logger.debug(
            f"Using {shell_type.value} instead of {config.shell_type.value} "
            f"for the {config.executor_type.value} executor"
        )

    factory = CommandExecutorFactory(platform_service, base_logger)
    executor = factory.create_executor(config.executor_type, shell_type)

    info = platform_service.get_system_info()
    logger.info(f"Running on {info.os}/{info.arch}")
    logger.info(f"Using shell: {shell_type.value}")
    logger.info(f"Using executor: {config.executor_type.value}")

    return run_action(config, executor, platform_service, logger)


def run() -> NoReturn:
    """Console script entry point."""
    sys.exit(main())
