from __future__ import annotations

import enum
from dataclasses import dataclass, field

from termcodec.config import CodecLimits, get_codec_limits

ESCAPE = 0x1B
INTRODUCER = ord("[")
PARAMETER_SEPARATOR = ord(";")


class ParseResult(enum.IntEnum):
    """Outcome of feeding one byte to a decoder."""
    NORMAL_CHARACTER = 0
    PARTIAL_COMMAND = 1
    COMPLETE_COMMAND = 2


class TerminalCommand(enum.IntEnum):
    INVALID = 0
    CURSOR_UP = enum.auto()
    CURSOR_DOWN = enum.auto()
    CURSOR_LEFT = enum.auto()
    CURSOR_RIGHT = enum.auto()
    CURSOR_MOVE = enum.auto()
    SET_CURSOR_ROW_ABSOLUTE = enum.auto()
    SET_CURSOR_COLUMN_ABSOLUTE = enum.auto()
    NEXT_LINE = enum.auto()
    REVERSE_LINE_FEED = enum.auto()
    SAVE_CURSOR_AND_ATTRIBUTES = enum.auto()
    RESTORE_CURSOR_AND_ATTRIBUTES = enum.auto()
    SET_HORIZONTAL_TAB = enum.auto()
    CLEAR_HORIZONTAL_TAB = enum.auto()
    SET_TOP_AND_BOTTOM_MARGIN = enum.auto()
    ERASE_IN_DISPLAY = enum.auto()
    ERASE_IN_DISPLAY_SELECTIVE = enum.auto()
    ERASE_IN_LINE = enum.auto()
    ERASE_IN_LINE_SELECTIVE = enum.auto()
    INSERT_LINES = enum.auto()
    DELETE_LINES = enum.auto()
    INSERT_CHARACTERS = enum.auto()
    DELETE_CHARACTERS = enum.auto()
    ERASE_CHARACTERS = enum.auto()
    KEYPAD_NUMERIC = enum.auto()
    KEYPAD_APPLICATION = enum.auto()
    SET_MODE = enum.auto()
    CLEAR_MODE = enum.auto()
    SET_PRIVATE_MODE = enum.auto()
    CLEAR_PRIVATE_MODE = enum.auto()
    SELECT_G0_CHARACTER_SET = enum.auto()
    SELECT_G1_CHARACTER_SET = enum.auto()
    SELECT_G2_CHARACTER_SET = enum.auto()
    SELECT_G3_CHARACTER_SET = enum.auto()
    SELECT_GRAPHIC_RENDITION = enum.auto()
    RESET = enum.auto()
    SOFT_RESET = enum.auto()
    DEVICE_ATTRIBUTES_PRIMARY = enum.auto()
    DEVICE_ATTRIBUTES_SECONDARY = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_DOWN = enum.auto()
    DOUBLE_LINE_HEIGHT_TOP_HALF = enum.auto()
    DOUBLE_LINE_HEIGHT_BOTTOM_HALF = enum.auto()
    SINGLE_WIDTH_LINE = enum.auto()
    DOUBLE_WIDTH_LINE = enum.auto()


class TerminalKey(enum.IntEnum):
    INVALID = 0
    INSERT = enum.auto()
    DELETE = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


class CommandFlags(enum.Flag):
    SEEN_ESCAPE = enum.auto()
    SEEN_PARAMETER = enum.auto()


class KeyFlags(enum.Flag):
    ALT = enum.auto()


NO_COMMAND_FLAGS = CommandFlags(0)
NO_KEY_FLAGS = KeyFlags(0)


def byte_value(value: int | bytes | str) -> int:
    """Convert a decoder argument to a byte value in range(256)."""
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range: {value}")
        return value
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"Expected a single byte, got {len(value)}")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {len(value)}")
        code = ord(value)
        if code > 0xFF:
            raise ValueError(f"Character {value!r} is not a single byte")
        return code
    raise TypeError(f"Expected int, bytes or str, got {type(value).__name__}")

CHARACTER_SET_COMMANDS = frozenset({
    TerminalCommand.SELECT_G0_CHARACTER_SET,
    TerminalCommand.SELECT_G1_CHARACTER_SET,
    TerminalCommand.SELECT_G2_CHARACTER_SET,
    TerminalCommand.SELECT_G3_CHARACTER_SET,
})


@dataclass(frozen=True)
class CommandEntry:
    """One row of the command table.

    An empty ``pre_parameter`` with a non-empty ``post_parameter`` means the
    final byte follows the escape directly. An empty ``post_parameter`` means
    any single byte after ``pre_parameter`` completes the command.
    """
    pre_parameter: bytes
    post_parameter: bytes
    command: TerminalCommand


@dataclass(frozen=True)
class KeyEntry:
    """One row of the key table. ``sequence`` excludes the leading escape."""
    sequence: bytes
    application_mode: bool
    key: TerminalKey


@dataclass
class OutputDecodeState:
    """
    Decode state for one output stream.

    Buffers are allocated once from ``limits`` and reused for every sequence;
    ``pre_parameter_size``, ``post_parameter_size`` and ``parameter_count``
    say how much of each is live. On ``COMPLETE_COMMAND`` the result is in
    ``command`` and ``parameters[:parameter_count]``.
    """
    limits: CodecLimits = field(default_factory=get_codec_limits)
    flags: CommandFlags = NO_COMMAND_FLAGS
    command: TerminalCommand = TerminalCommand.INVALID
    parameter_count: int = 0
    parameter_index: int = 0
    pre_parameter_size: int = 0
    post_parameter_size: int = 0
    parameter: list[int] = field(init=False, repr=False)
    pre_parameter_buffer: bytearray = field(init=False, repr=False)
    post_parameter_buffer: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.parameter = [0] * self.limits.max_parameters
        self.pre_parameter_buffer = bytearray(self.limits.max_command_characters)
        self.post_parameter_buffer = bytearray(self.limits.max_command_characters)

    @property
    def pre_parameter(self) -> bytes:
        return bytes(self.pre_parameter_buffer[:self.pre_parameter_size])

    @property
    def post_parameter(self) -> bytes:
        return bytes(self.post_parameter_buffer[:self.post_parameter_size])

    @property
    def parameters(self) -> list[int]:
        """The live parameters, ``parameter[:parameter_count]``."""
        return self.parameter[:self.parameter_count]

    @property
    def designator(self) -> bytes | None:
        """Final byte of a completed select-character-set command."""
        if self.command not in CHARACTER_SET_COMMANDS:
            return None
        if self.pre_parameter_size < 2:
            return None
        return self.pre_parameter[-1:]

    @property
    def in_sequence(self) -> bool:
        return CommandFlags.SEEN_ESCAPE in self.flags

    def reset(self) -> None:
        """Start a new sequence, as if an escape byte had just arrived."""
        self.flags = CommandFlags.SEEN_ESCAPE
        self.command = TerminalCommand.INVALID
        self.parameter_count = 0
        self.parameter_index = 0
        self.parameter[0] = 0
        self.pre_parameter_size = 0
        self.post_parameter_size = 0


@dataclass
class InputDecodeState:
    """
    Decode state for one input stream.

    ``buffer`` holds the escape byte and whatever followed it. On
    ``COMPLETE_COMMAND`` the result is in ``key`` and ``flags``.
    """
    limits: CodecLimits = field(default_factory=get_codec_limits)
    flags: KeyFlags = NO_KEY_FLAGS
    key: TerminalKey = TerminalKey.INVALID
    buffer_size: int = 0
    buffer: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.buffer = bytearray(self.limits.max_key_characters)

    @property
    def sequence(self) -> bytes:
        return bytes(self.buffer[:self.buffer_size])

    @property
    def in_sequence(self) -> bool:
        return self.buffer_size != 0

    @property
    def alt(self) -> bool:
        return KeyFlags.ALT in self.flags


@dataclass(frozen=True)
class CommandEvent:
    """A completed, normalized output command."""
    command: TerminalCommand
    parameters: tuple[int, ...] = ()
    designator: bytes | None = None


@dataclass(frozen=True)
class KeyEvent:
    """A completed key press."""
    key: TerminalKey
    flags: KeyFlags = NO_KEY_FLAGS

    @property
    def alt(self) -> bool:
        return KeyFlags.ALT in self.flags
