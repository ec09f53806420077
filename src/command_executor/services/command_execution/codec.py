"""
Base64 codec for shell commands.

PowerShell's ``-EncodedCommand`` expects base64 of UTF-16LE text, every other
shell gets base64 of UTF-8. Decoding always interprets the bytes as UTF-8,
so decoding a PowerShell payload only round-trips for ASCII commands.
"""

import base64
import binascii

from command_executor.exceptions import DecodeError
from .shell_types import ShellType


def encode_utf16le(command: str) -> str:
    """Base64-encode a command as UTF-16LE, the form PowerShell expects."""
    return base64.b64encode(command.encode("utf-16-le")).decode("ascii")


def encode_command(command: str, shell_type: ShellType) -> str:
    """
    Encode a command to base64 for the given shell.

    Args:
        command: Plaintext command
        shell_type: Destination shell; only POWERSHELL changes the charset

    Returns:
        Standard-alphabet base64 text
    """
    if shell_type == ShellType.POWERSHELL:
        return encode_utf16le(command)
    return base64.b64encode(command.encode("utf-8")).decode("ascii")


def decode_command(encoded_command: str) -> str:
    """
    Decode a standard base64 payload to UTF-8 text.

    CR and LF are skipped; any other character outside the alphabet fails.

    Raises:
        DecodeError: If the payload is not valid base64 or not valid UTF-8
    """
    try:
        unwrapped = encoded_command.replace("\r", "").replace("\n", "")
        raw = base64.b64decode(unwrapped, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"failed to decode base64: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"failed to decode base64: {e}") from e
