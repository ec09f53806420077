"""
Shell and executor type enumerations.

``ShellType.AUTO`` is a deferred selector; resolve_shell_type is the only
place it is mapped to a concrete shell.
"""

from enum import Enum


class ShellType(str, Enum):
    """Shell used to run a command"""

    AUTO = "auto"
    CMD = "cmd"
    POWERSHELL = "powershell"
    SH = "sh"


class ExecutorType(str, Enum):
    """Execution strategy used for a command"""

    BASE64 = "base64"
    PLAIN = "plain"


_SHELL_ALIASES = {
    "auto": ShellType.AUTO,
    "cmd": ShellType.CMD,
    "powershell": ShellType.POWERSHELL,
    "ps": ShellType.POWERSHELL,
    "ps1": ShellType.POWERSHELL,
    "sh": ShellType.SH,
}


def parse_shell_type(value: str) -> ShellType:
    """Parse a shell name, falling back to AUTO for unknown values."""
    return _SHELL_ALIASES.get((value or "").strip().lower(), ShellType.AUTO)


def parse_executor_type(value: str) -> ExecutorType:
    """Parse an executor name, falling back to BASE64 for unknown values."""
    try:
        return ExecutorType((value or "").strip().lower())
    except ValueError:
        return ExecutorType.BASE64


def is_known_shell_type(value: str) -> bool:
    return (value or "").strip().lower() in _SHELL_ALIASES


def is_known_executor_type(value: str) -> bool:
    return (value or "").strip().lower() in {e.value for e in ExecutorType}


def resolve_shell_type(shell_type: ShellType, is_windows: bool) -> ShellType:
    """
    Resolve AUTO to the native shell of the host.

    Args:
        shell_type: Requested shell type
        is_windows: Whether the host is Windows

    Returns:
        CMD on Windows, SH elsewhere; concrete shell types are returned as-is
    """
    if shell_type != ShellType.AUTO:
        return shell_type
    return ShellType.CMD if is_windows else ShellType.SH
