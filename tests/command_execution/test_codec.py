"""
Tests for the base64 command codec.
"""

import base64
import textwrap

import pytest

from command_executor.exceptions import DecodeError
from command_executor.services.command_execution.codec import (
    decode_command,
    encode_command,
    encode_utf16le,
)
from command_executor.services.command_execution.shell_types import ShellType


class TestEncodeCommand:
    """Test encoding commands for each shell."""

    def test_encode_for_sh_uses_utf8(self) -> None:
        assert encode_command("dir", ShellType.SH) == "ZGly"

    def test_encode_for_auto_and_cmd_uses_utf8(self) -> None:
        assert encode_command("echo hi", ShellType.AUTO) == "ZWNobyBoaQ=="
        assert encode_command("echo hi", ShellType.CMD) == "ZWNobyBoaQ=="

    def test_encode_for_powershell_uses_utf16le(self) -> None:
        """PowerShell payloads are two bytes per code unit, low byte first."""
        encoded = encode_command("dir", ShellType.POWERSHELL)

        assert encoded == "ZABpAHIA"
        assert base64.b64decode(encoded) == b"d\x00i\x00r\x00"

    def test_encode_utf16le_non_ascii(self) -> None:
        encoded = encode_utf16le("é€")
        assert base64.b64decode(encoded) == b"\xe9\x00\xac\x20"

    def test_encode_non_ascii_utf8(self) -> None:
        encoded = encode_command("echo héllo", ShellType.SH)
        assert base64.b64decode(encoded) == "echo héllo".encode("utf-8")

    def test_encoded_output_uses_standard_alphabet(self) -> None:
        encoded = encode_command("ls -la | grep '?>' && echo ~~~", ShellType.SH)
        alphabet = set(
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
        )
        assert set(encoded) <= alphabet
        assert "'" not in encoded


class TestDecodeCommand:
    """Test decoding base64 payloads."""

    def test_decode(self) -> None:
        assert decode_command("ZGly") == "dir"

    @pytest.mark.parametrize(
        "command", ["whoami", "echo Hello World", "ls -la /tmp", "ipconfig /all"]
    )
    def test_decode_reverses_utf8_encoding(self, command: str) -> None:
        assert decode_command(encode_command(command, ShellType.SH)) == command

    def test_decode_wrapped_payload(self) -> None:
        """Line breaks inserted by wrapping base64 output are skipped."""
        assert decode_command("ZWNo\nbyBo\r\naQ==") == "echo hi"

    def test_decode_payload_wrapped_at_76_columns(self) -> None:
        command = "echo " + "x" * 80
        encoded = encode_command(command, ShellType.SH)
        wrapped = "\n".join(textwrap.wrap(encoded, 76)) + "\n"

        assert "\n" in wrapped.rstrip("\n")
        assert decode_command(wrapped) == command

    def test_decode_rejects_other_whitespace(self) -> None:
        with pytest.raises(DecodeError):
            decode_command("ZGly ZGly")

    def test_decode_invalid_characters(self) -> None:
        with pytest.raises(DecodeError, match="failed to decode base64"):
            decode_command("not base64!")

    def test_decode_bad_padding(self) -> None:
        with pytest.raises(DecodeError):
            decode_command("ZGl")

    def test_decode_invalid_utf8(self) -> None:
        with pytest.raises(DecodeError):
            decode_command("//4=")

    def test_decode_does_not_understand_utf16le(self) -> None:
        """Decoding is always UTF-8, so a PowerShell payload keeps its NUL bytes."""
        decoded = decode_command(encode_command("dir", ShellType.POWERSHELL))

        assert decoded != "dir"
        assert decoded == "d\x00i\x00r\x00"

    def test_decode_error_chains_cause(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_command("@@@@")
        assert exc_info.value.__cause__ is not None
        assert isinstance(exc_info.value, ValueError)
