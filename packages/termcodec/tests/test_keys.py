"""
Tests for termcodec/keys.py - key input decoding and encoding.
"""

import pytest

from termcodec.config import CodecLimits
from termcodec.errors import BufferTooSmallError, EncodeError, UnknownKeyError
from termcodec.keys import decode_input, encode_input, encode_key, key_event
from termcodec.tables import KEY_TABLE
from termcodec.types import (
    InputDecodeState,
    KeyEvent,
    KeyFlags,
    ParseResult,
    TerminalKey,
)

NORMAL = ParseResult.NORMAL_CHARACTER
PARTIAL = ParseResult.PARTIAL_COMMAND
COMPLETE = ParseResult.COMPLETE_COMMAND


class TestDecodeInput:
    """Tests for decode_input function."""

    def test_plain_text(self, feed_input):
        assert feed_input(b"abc") == [NORMAL] * 3

    @pytest.mark.parametrize("sequence,key", [
        (b"\x1b[A", TerminalKey.UP),
        (b"\x1b[B", TerminalKey.DOWN),
        (b"\x1b[C", TerminalKey.RIGHT),
        (b"\x1b[D", TerminalKey.LEFT),
        (b"\x1b[1~", TerminalKey.HOME),
        (b"\x1b[2~", TerminalKey.INSERT),
        (b"\x1b[3~", TerminalKey.DELETE),
        (b"\x1b[4~", TerminalKey.END),
        (b"\x1b[5~", TerminalKey.PAGE_UP),
        (b"\x1b[6~", TerminalKey.PAGE_DOWN),
    ])
    def test_keys_complete_on_last_byte(self, feed_input, input_state, sequence, key):
        assert feed_input(sequence) == [PARTIAL] * (len(sequence) - 1) + [COMPLETE]
        assert input_state.key == key
        assert not input_state.alt

    def test_delete_key(self, feed_input, input_state):
        assert feed_input(b"\x1b[3~") == [PARTIAL, PARTIAL, PARTIAL, COMPLETE]
        assert input_state.key == TerminalKey.DELETE

    def test_alt_up(self, feed_input, input_state):
        assert feed_input(b"\x1b\x1b[A") == [PARTIAL, PARTIAL, PARTIAL, COMPLETE]
        assert input_state.key == TerminalKey.UP
        assert input_state.flags == KeyFlags.ALT

    def test_alt_cleared_by_next_sequence(self, feed_input, input_state):
        feed_input(b"\x1b\x1b[A")
        assert feed_input(b"\x1b[B")[-1] == COMPLETE
        assert input_state.key == TerminalKey.DOWN
        assert not input_state.alt

    def test_repeated_escapes_stay_partial(self, feed_input, input_state):
        assert feed_input(b"\x1b\x1b\x1b") == [PARTIAL] * 3
        assert input_state.alt
        assert feed_input(b"[C")[-1] == COMPLETE

    def test_unknown_sequence_is_normal(self, feed_input, input_state):
        assert feed_input(b"\x1bx") == [PARTIAL, NORMAL]
        assert not input_state.in_sequence
        assert feed_input(b"y") == [NORMAL]

    def test_unknown_final(self, feed_input):
        assert feed_input(b"\x1b[9~") == [PARTIAL, PARTIAL, NORMAL, NORMAL]

    def test_buffer_reset_after_complete(self, feed_input, input_state):
        feed_input(b"\x1b[A")
        assert not input_state.in_sequence
        assert feed_input(b"A") == [NORMAL]

    def test_escape_after_complete_is_not_alt(self, feed_input, input_state):
        feed_input(b"\x1b[A")
        assert feed_input(b"\x1b[D")[-1] == COMPLETE
        assert not input_state.alt

    def test_buffer_overflow(self):
        state = InputDecodeState(limits=CodecLimits(max_key_characters=2))
        results = [decode_input(state, byte) for byte in b"\x1b[3"]
        assert results == [PARTIAL, PARTIAL, NORMAL]
        assert not state.in_sequence

    def test_key_event_snapshot(self, feed_input, input_state):
        feed_input(b"\x1b\x1b[6~")
        event = key_event(input_state)
        assert event == KeyEvent(TerminalKey.PAGE_DOWN, KeyFlags.ALT)
        assert event.alt


class TestEncodeInput:
    """Tests for encode_input function."""

    def test_up(self):
        assert encode_input(TerminalKey.UP) == b"\x1b[A"

    def test_delete(self):
        assert encode_input(TerminalKey.DELETE) == b"\x1b[3~"

    def test_alt_prefix(self):
        assert encode_input(TerminalKey.UP, KeyFlags.ALT) == b"\x1b\x1b[A"

    def test_unknown_key(self):
        with pytest.raises(UnknownKeyError):
            encode_input(TerminalKey.INVALID)

    def test_unknown_key_is_encode_error(self):
        with pytest.raises(EncodeError):
            encode_input(TerminalKey.INVALID)

    def test_buffer_too_small(self):
        with pytest.raises(BufferTooSmallError):
            encode_input(TerminalKey.HOME, buffer_size=3)
        with pytest.raises(BufferTooSmallError):
            encode_input(TerminalKey.UP, KeyFlags.ALT, buffer_size=3)
        with pytest.raises(BufferTooSmallError):
            encode_input(TerminalKey.UP, buffer_size=0)

    def test_exact_buffer(self):
        assert encode_input(TerminalKey.HOME, buffer_size=4) == b"\x1b[1~"

    @pytest.mark.parametrize("entry", KEY_TABLE, ids=lambda entry: entry.key.name)
    def test_decode_encoded_key(self, entry):
        state = InputDecodeState()
        data = encode_key(KeyEvent(entry.key, KeyFlags.ALT))
        results = [decode_input(state, byte) for byte in data]
        assert results[-1] == COMPLETE
        assert key_event(state) == KeyEvent(entry.key, KeyFlags.ALT)
