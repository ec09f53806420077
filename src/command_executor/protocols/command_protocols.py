"""
Protocol interfaces for command execution strategies.
"""

from abc import ABC, abstractmethod


class CommandExecutorProtocol(ABC):
    """
    Protocol for a command execution strategy.

    Every strategy exposes the same three operations; what "encoded" means
    depends on the strategy (identity for plain, base64 for base64).
    """

    @abstractmethod
    def execute_command(self, command: str) -> None:
        """
        Execute a command, falling back to the strategy default when empty.

        Raises:
            ExecutionError: If the process fails to start, exits non-zero,
                or a payload that has to be decoded locally is invalid
        """
        pass

    @abstractmethod
    def encode_command(self, command: str) -> str:
        """Encode a plaintext command into the strategy's payload form."""
        pass

    @abstractmethod
    def decode_command(self, encoded_command: str) -> str:
        """
        Decode a payload back to plaintext.

        Raises:
            DecodeError: If the payload is malformed
        """
        pass
