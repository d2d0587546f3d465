"""Exceptions raised by the sequence encoders."""

from __future__ import annotations


class TermCodecError(Exception):
    """Base class for termcodec errors."""
    pass


class EncodeError(TermCodecError):
    """Raised when a command or key cannot be turned into a byte sequence."""
    pass


class UnknownCommandError(EncodeError):
    """Raised when a command has no entry in the command table."""
    def __init__(self, command: int):
        self.command = command
        super().__init__(f"No sequence for command {command!r}")


class UnknownKeyError(EncodeError):
    """Raised when a key has no entry in the key table."""
    def __init__(self, key: int):
        self.key = key
        super().__init__(f"No sequence for key {key!r}")


class BufferTooSmallError(EncodeError):
    """Raised when the encoded sequence does not fit the destination."""
    def __init__(self, needed: int, buffer_size: int):
        self.needed = needed
        self.buffer_size = buffer_size
        super().__init__(
            f"Sequence needs at least {needed} bytes, buffer holds {buffer_size}"
        )


class InvalidFinalError(EncodeError):
    """Raised when a select-character-set command lacks exactly one final byte."""
    def __init__(self, command: int, final: bytes):
        self.command = command
        self.final = final
        super().__init__(
            f"Command {command!r} needs exactly one final byte, got {final!r}"
        )
