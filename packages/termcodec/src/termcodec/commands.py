"""
Output command decoding and encoding.

Bytes written by a program to its terminal are fed one at a time through
decode_output(). Each call reports whether the byte is ordinary text, part of
an escape sequence still in progress, or the byte that completed a command.

API:
- decode_output(state, byte) - Advance the decoder by one byte
- normalize_parameters(state) - Fill in default parameters for a command
- encode_output(command, parameters, ...) - Build the bytes for a command
"""

from __future__ import annotations

import logging
from typing import Sequence

from termcodec.errors import BufferTooSmallError, InvalidFinalError, UnknownCommandError
from termcodec.match import match_command
from termcodec.tables import COMMAND_TABLE, find_command_entry
from termcodec.types import (
    ESCAPE,
    INTRODUCER,
    NO_COMMAND_FLAGS,
    PARAMETER_SEPARATOR,
    CommandEntry,
    CommandEvent,
    CommandFlags,
    OutputDecodeState,
    ParseResult,
    TerminalCommand,
    byte_value,
)

logger = logging.getLogger(__name__)

_DIGIT_ZERO = ord("0")
_DIGIT_NINE = ord("9")


# =============================================================================
# Decoding
# =============================================================================

def _abort(state: OutputDecodeState, reason: str) -> ParseResult:
    """Drop the sequence in progress and report the byte as ordinary text."""
    logger.debug(
        "Dropping output sequence %r (%s)",
        bytes([ESCAPE]) + state.pre_parameter + state.post_parameter,
        reason,
    )
    state.flags = NO_COMMAND_FLAGS
    return ParseResult.NORMAL_CHARACTER


def _add_parameter_digit(state: OutputDecodeState, digit: int) -> ParseResult:
    state.flags |= CommandFlags.SEEN_PARAMETER
    index = state.parameter_index

    # The first digit of a slot opens it
    if state.parameter_count < index + 1:
        if index >= state.limits.max_parameters:
            return _abort(state, "too many parameters")

        state.parameter_count = index + 1
        state.parameter[index] = 0

    value = state.parameter[index] * 10 + digit
    state.parameter[index] = min(value, state.limits.max_parameter_value)
    return ParseResult.PARTIAL_COMMAND


def _append_command_byte(state: OutputDecodeState, character: int) -> bool:
    """Append to the pre- or post-parameter run. Returns False on overflow."""
    limit = state.limits.max_command_characters
    if CommandFlags.SEEN_PARAMETER in state.flags:
        if state.post_parameter_size >= limit:
            return False
        state.post_parameter_buffer[state.post_parameter_size] = character
        state.post_parameter_size += 1
    else:
        if state.pre_parameter_size >= limit:
            return False
        state.pre_parameter_buffer[state.pre_parameter_size] = character
        state.pre_parameter_size += 1
    return True


def _lookup(pre: bytes, post: bytes) -> tuple[CommandEntry | None, bool]:
    """Scan the command table for the first full match.

    Returns:
        (matching entry or None, whether any entry matched partially)
    """
    partial = False
    for entry in COMMAND_TABLE:
        status = match_command(pre, post, entry)
        if status == "full":
            return entry, partial
        if status == "partial":
            partial = True

        # Rows with no pre-parameter literal may have had their final byte
        # collected as pre-parameter bytes.
        if not entry.pre_parameter and not post:
            status = match_command(b"", pre, entry)
            if status == "full":
                return entry, partial
            if status == "partial":
                partial = True

    return None, partial


def decode_output(state: OutputDecodeState, byte: int | bytes | str) -> ParseResult:
    """
    Process one byte destined for the terminal output.

    Args:
        state: Decode state for this stream, created once and reused
        byte: The byte, as an int or a length-1 bytes/str

    Returns:
        NORMAL_CHARACTER if the byte should be displayed, PARTIAL_COMMAND if
        it belongs to an unfinished sequence, COMPLETE_COMMAND if it finished
        one (``state.command`` and ``state.parameters`` hold the result).
    """
    character = byte_value(byte)

    # An escape always starts a new command
    if character == ESCAPE:
        state.reset()
        return ParseResult.PARTIAL_COMMAND

    if CommandFlags.SEEN_ESCAPE not in state.flags:
        return ParseResult.NORMAL_CHARACTER

    # Control characters pass through without ending the sequence
    if character < 0x20 or character > 0x7E:
        return ParseResult.NORMAL_CHARACTER

    # After a CSI a digit is a parameter, otherwise it is a command byte
    # (ESC 7, ESC # 3).
    if _DIGIT_ZERO <= character <= _DIGIT_NINE:
        if state.pre_parameter_size != 0 and state.pre_parameter_buffer[0] == INTRODUCER:
            return _add_parameter_digit(state, character - _DIGIT_ZERO)

    elif character == PARAMETER_SEPARATOR:
        state.parameter_index += 1
        if state.parameter_index < state.limits.max_parameters:
            state.parameter[state.parameter_index] = 0

        return ParseResult.PARTIAL_COMMAND

    if not _append_command_byte(state, character):
        return _abort(state, "command too long")

    if character == INTRODUCER:
        return ParseResult.PARTIAL_COMMAND

    entry, partial = _lookup(state.pre_parameter, state.post_parameter)
    if entry is None:
        if partial:
            return ParseResult.PARTIAL_COMMAND

        return _abort(state, "no matching command")

    state.command = entry.command
    state.flags = NO_COMMAND_FLAGS
    return ParseResult.COMPLETE_COMMAND


# =============================================================================
# Parameter Normalization
# =============================================================================

_ONE_PARAMETER_MOTION = frozenset({
    TerminalCommand.CURSOR_UP,
    TerminalCommand.CURSOR_DOWN,
    TerminalCommand.CURSOR_LEFT,
    TerminalCommand.CURSOR_RIGHT,
    TerminalCommand.SCROLL_UP,
    TerminalCommand.SCROLL_DOWN,
    TerminalCommand.SET_CURSOR_ROW_ABSOLUTE,
    TerminalCommand.SET_CURSOR_COLUMN_ABSOLUTE,
})

_NO_PARAMETERS = frozenset({
    TerminalCommand.NEXT_LINE,
    TerminalCommand.REVERSE_LINE_FEED,
    TerminalCommand.SAVE_CURSOR_AND_ATTRIBUTES,
    TerminalCommand.RESTORE_CURSOR_AND_ATTRIBUTES,
    TerminalCommand.SET_HORIZONTAL_TAB,
    TerminalCommand.KEYPAD_NUMERIC,
    TerminalCommand.KEYPAD_APPLICATION,
    TerminalCommand.RESET,
    TerminalCommand.SOFT_RESET,
    TerminalCommand.DEVICE_ATTRIBUTES_PRIMARY,
    TerminalCommand.DEVICE_ATTRIBUTES_SECONDARY,
    TerminalCommand.DOUBLE_LINE_HEIGHT_TOP_HALF,
    TerminalCommand.DOUBLE_LINE_HEIGHT_BOTTOM_HALF,
    TerminalCommand.SINGLE_WIDTH_LINE,
    TerminalCommand.DOUBLE_WIDTH_LINE,
})

_ONE_PARAMETER_DEFAULT_ZERO = frozenset({
    TerminalCommand.CLEAR_HORIZONTAL_TAB,
    TerminalCommand.ERASE_IN_DISPLAY,
    TerminalCommand.ERASE_IN_LINE,
})

_ONE_PARAMETER_DEFAULT_ONE = frozenset({
    TerminalCommand.INSERT_LINES,
    TerminalCommand.DELETE_LINES,
    TerminalCommand.INSERT_CHARACTERS,
    TerminalCommand.DELETE_CHARACTERS,
    TerminalCommand.ERASE_CHARACTERS,
})


def normalize_parameters(state: OutputDecodeState) -> None:
    """
    Fill in default parameter values for a completed command.

    Motion commands get exactly one parameter and treat 0 as 1. Cursor move
    gets exactly two, each defaulting to 1. Commands that take no parameters
    drop whatever was parsed. Margins, modes, character sets and graphic
    rendition are left as parsed.
    """
    command = state.command
    parameter = state.parameter
    if command in _ONE_PARAMETER_MOTION:
        if state.parameter_count == 0 or parameter[0] == 0:
            parameter[0] = 1

        state.parameter_count = 1

    elif command == TerminalCommand.CURSOR_MOVE:
        for index in range(2):
            if index >= state.parameter_count or parameter[index] == 0:
                parameter[index] = 1

        state.parameter_count = 2

    elif command in _NO_PARAMETERS:
        state.parameter_count = 0

    elif command in _ONE_PARAMETER_DEFAULT_ZERO:
        if state.parameter_count == 0:
            parameter[0] = 0

        state.parameter_count = 1

    elif command in _ONE_PARAMETER_DEFAULT_ONE:
        if state.parameter_count == 0:
            parameter[0] = 1

        state.parameter_count = 1


def command_event(state: OutputDecodeState) -> CommandEvent:
    """Snapshot the completed command held by ``state``."""
    return CommandEvent(
        command=state.command,
        parameters=tuple(state.parameters),
        designator=state.designator,
    )


# =============================================================================
# Encoding
# =============================================================================

def _check_size(needed: int, buffer_size: int | None) -> None:
    if buffer_size is not None and needed > buffer_size:
        raise BufferTooSmallError(needed, buffer_size)


def encode_output(
    command: TerminalCommand,
    parameters: Sequence[int] = (),
    count: int | None = None,
    post_parameter: bytes = b"",
    buffer_size: int | None = None,
) -> bytes:
    """
    Create the byte sequence for a terminal command.

    The sequence is ESC, the row's pre-parameter literal, the parameters in
    decimal separated by ``;``, then the post-parameter literal. Select
    character set rows have no post-parameter literal; their final byte is
    taken from ``post_parameter``, which must be exactly one byte.

    Args:
        command: Command to encode
        parameters: Parameter values, usually already normalized
        count: Number of leading ``parameters`` to use (default: all)
        post_parameter: Final byte for select-character-set commands
        buffer_size: Capacity of the destination, or None for no limit

    Returns:
        The encoded sequence

    Raises:
        UnknownCommandError: No table row produces ``command``
        InvalidFinalError: A select-character-set final is not one byte
        BufferTooSmallError: The sequence would not fit in ``buffer_size``
    """
    entry = find_command_entry(command)
    if entry is None:
        logger.debug("Cannot encode unknown command %r", command)
        raise UnknownCommandError(command)

    prefix = bytes([ESCAPE]) + entry.pre_parameter
    if not entry.post_parameter:
        if len(post_parameter) != 1:
            raise InvalidFinalError(command, post_parameter)

        sequence = prefix + post_parameter
        _check_size(len(sequence), buffer_size)
        return sequence

    if count is None:
        count = len(parameters)
    elif count > len(parameters):
        raise ValueError(f"count {count} exceeds {len(parameters)} parameters")

    sequence = bytearray(prefix)
    _check_size(len(sequence), buffer_size)
    for index in range(count):
        value = parameters[index]
        if value < 0:
            raise ValueError(f"Parameter {index} is negative: {value}")

        sequence += str(value).encode("ascii")
        if index != count - 1:
            sequence.append(PARAMETER_SEPARATOR)

        _check_size(len(sequence), buffer_size)

    sequence += entry.post_parameter
    _check_size(len(sequence), buffer_size)
    return bytes(sequence)


def encode_command(event: CommandEvent, buffer_size: int | None = None) -> bytes:
    """Encode a decoded CommandEvent back into its byte sequence."""
    return encode_output(
        event.command,
        event.parameters,
        post_parameter=event.designator or b"",
        buffer_size=buffer_size,
    )
