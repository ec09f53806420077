"""
Shell resolver that turns a payload and shell type into a process argv.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from command_executor.exceptions import ConfigError
from command_executor.protocols.platform_protocols import PlatformServiceProtocol
from command_executor.services.platform.platform_service import PlatformService
from .shell_types import ShellType, resolve_shell_type


@dataclass(frozen=True)
class ShellInvocation:
    """Program and arguments used to spawn a shell."""

    program: str
    args: List[str] = field(default_factory=list)

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]


def validate_command(command: str) -> None:
    """
    Basic command validation.

    Raises:
        ConfigError: If the command is empty
    """
    if not command:
        raise ConfigError("command cannot be empty")


def build_shell_invocation(
    payload: str,
    shell_type: ShellType,
    is_base64_payload: bool = False,
    platform_service: Optional[PlatformServiceProtocol] = None,
) -> ShellInvocation:
    """
    Build the shell invocation for a payload.

    Plaintext payloads are handed to the shell's "run this string" flag.
    Base64 payloads use the shell's own decoding: ``-EncodedCommand`` for
    PowerShell and a ``base64 -d`` pipe for sh. CMD has no encoded form, so
    the payload is passed through unchanged and callers must decode first.

    Args:
        payload: Plaintext command or base64 payload
        shell_type: Requested shell; AUTO is resolved against the host OS
        is_base64_payload: Whether the payload is base64 encoded
        platform_service: Platform used to resolve AUTO

    Returns:
        ShellInvocation with program and arguments

    Raises:
        ConfigError: If the payload is empty
    """
    validate_command(payload)
    platform_service = platform_service or PlatformService()
    shell_type = resolve_shell_type(shell_type, platform_service.is_windows())

    if is_base64_payload:
        if shell_type == ShellType.POWERSHELL:
            return ShellInvocation("powershell", ["-EncodedCommand", payload])
        if shell_type == ShellType.SH:
            # standard base64 never contains a single quote
            return ShellInvocation("sh", ["-c", f"echo '{payload}' | base64 -d | sh"])
        return ShellInvocation("cmd", ["/C", payload])

    if shell_type == ShellType.POWERSHELL:
        return ShellInvocation("powershell", ["-Command", payload])
    if shell_type == ShellType.SH:
        return ShellInvocation("sh", ["-c", payload])
    return ShellInvocation("cmd", ["/C", payload])
