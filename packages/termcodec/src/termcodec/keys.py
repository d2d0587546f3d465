"""
Keyboard input decoding and encoding.

Key presses arrive from the terminal as escape sequences (``ESC [ A`` for the
up arrow). decode_input() recognizes them one byte at a time. A doubled escape
marks the next recognized key as pressed with ALT held.

API:
- decode_input(state, byte) - Advance the key decoder by one byte
- encode_input(key, flags) - Build the bytes a terminal sends for a key
"""

from __future__ import annotations

import logging

from termcodec.errors import BufferTooSmallError, UnknownKeyError
from termcodec.match import match_key
from termcodec.tables import KEY_TABLE, find_key_entry
from termcodec.types import (
    ESCAPE,
    NO_KEY_FLAGS,
    InputDecodeState,
    KeyEntry,
    KeyEvent,
    KeyFlags,
    ParseResult,
    TerminalKey,
    byte_value,
)

logger = logging.getLogger(__name__)


def _lookup(sequence: bytes) -> tuple[KeyEntry | None, bool]:
    partial = False
    for entry in KEY_TABLE:
        status = match_key(sequence, entry)
        if status == "full":
            return entry, partial
        if status == "partial":
            partial = True
    return None, partial


def decode_input(state: InputDecodeState, byte: int | bytes | str) -> ParseResult:
    """
    Process one byte received from the terminal keyboard.

    Args:
        state: Decode state for this stream, created once and reused
        byte: The byte, as an int or a length-1 bytes/str

    Returns:
        NORMAL_CHARACTER for ordinary input, PARTIAL_COMMAND while a key
        sequence is in progress, COMPLETE_COMMAND when ``state.key`` and
        ``state.flags`` hold a recognized key.
    """
    character = byte_value(byte)

    if character == ESCAPE:
        # Two escapes in a row means ALT was held down
        if state.buffer_size == 1 and state.buffer[0] == ESCAPE:
            state.flags |= KeyFlags.ALT
            return ParseResult.PARTIAL_COMMAND

        state.buffer[0] = character
        state.buffer_size = 1
        state.flags = NO_KEY_FLAGS
        return ParseResult.PARTIAL_COMMAND

    if state.buffer_size == 0:
        return ParseResult.NORMAL_CHARACTER

    if state.buffer_size >= state.limits.max_key_characters:
        logger.warning("Key sequence %r overflowed its buffer", state.sequence)
        state.buffer_size = 0
        return ParseResult.NORMAL_CHARACTER

    state.buffer[state.buffer_size] = character
    state.buffer_size += 1
    entry, partial = _lookup(bytes(state.buffer[1:state.buffer_size]))
    if entry is None:
        if partial:
            return ParseResult.PARTIAL_COMMAND

        logger.debug("Dropping unrecognized key sequence %r", state.sequence)
        state.buffer_size = 0
        return ParseResult.NORMAL_CHARACTER

    state.key = entry.key
    state.buffer_size = 0
    return ParseResult.COMPLETE_COMMAND


def key_event(state: InputDecodeState) -> KeyEvent:
    """Snapshot the completed key held by ``state``."""
    return KeyEvent(key=state.key, flags=state.flags)


def encode_input(
    key: TerminalKey,
    flags: KeyFlags = NO_KEY_FLAGS,
    buffer_size: int | None = None,
) -> bytes:
    """
    Create the byte sequence a terminal sends for a key press.

    Args:
        key: Key to encode
        flags: KeyFlags.ALT prefixes an extra escape
        buffer_size: Capacity of the destination, or None for no limit

    Returns:
        The encoded sequence

    Raises:
        UnknownKeyError: No table row produces ``key``
        BufferTooSmallError: The sequence would not fit in ``buffer_size``
    """
    entry = find_key_entry(key)
    if entry is None:
        logger.debug("Cannot encode unknown key %r", key)
        raise UnknownKeyError(key)

    prefix = bytes([ESCAPE])
    if KeyFlags.ALT in flags:
        prefix = bytes([ESCAPE]) + prefix

    sequence = prefix + entry.sequence
    if buffer_size is not None and len(sequence) > buffer_size:
        raise BufferTooSmallError(len(sequence), buffer_size)
    return sequence


def encode_key(event: KeyEvent, buffer_size: int | None = None) -> bytes:
    """Encode a decoded KeyEvent back into its byte sequence."""
    return encode_input(event.key, event.flags, buffer_size=buffer_size)
