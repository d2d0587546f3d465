"""
OutputStream and InputStream feed whole chunks through the decoders.

Terminal data arrives in arbitrary chunks, and an escape sequence can be split
across any of them. For example ``\\x1b[12;40H`` might arrive as:
- Chunk 1: `\\x1b[1`
- Chunk 2: `2;40`
- Chunk 3: `H`

Each stream keeps its decode state between calls to ``process()`` and reports
runs of ordinary bytes and completed commands or keys through callbacks, in
the order they occurred.
"""

from __future__ import annotations

import logging
from typing import Callable

from termcodec.commands import command_event, decode_output, normalize_parameters
from termcodec.config import CodecLimits
from termcodec.keys import decode_input, key_event
from termcodec.types import (
    CommandEvent,
    InputDecodeState,
    KeyEvent,
    OutputDecodeState,
    ParseResult,
)

logger = logging.getLogger(__name__)


def _as_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class OutputStream:
    """
    Decodes program output into text and terminal commands.

    Usage:
        stream = OutputStream()
        stream.on_text = lambda text: print(f"Text: {text!r}")
        stream.on_command = lambda event: print(f"Command: {event}")
        stream.process(b"hi\\x1b[2J")
    """

    def __init__(self, limits: CodecLimits | None = None) -> None:
        self._state = (
            OutputDecodeState() if limits is None else OutputDecodeState(limits=limits)
        )
        self._text = bytearray()

        # Callbacks
        self.on_text: Callable[[bytes], None] | None = None
        self.on_command: Callable[[CommandEvent], None] | None = None

    @property
    def state(self) -> OutputDecodeState:
        return self._state

    @property
    def in_sequence(self) -> bool:
        """Whether an escape sequence is waiting for more bytes."""
        return self._state.in_sequence

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = bytes(self._text)
        self._text.clear()
        if self.on_text:
            self.on_text(text)

    def _emit_command(self, event: CommandEvent) -> None:
        self._flush_text()
        if self.on_command:
            self.on_command(event)

    def process(self, data: str | bytes) -> None:
        """
        Process output data.

        Args:
            data: Output data as bytes, or str to be sent as UTF-8
        """
        for character in _as_bytes(data):
            result = decode_output(self._state, character)
            if result == ParseResult.NORMAL_CHARACTER:
                self._text.append(character)
            elif result == ParseResult.COMPLETE_COMMAND:
                normalize_parameters(self._state)
                self._emit_command(command_event(self._state))

        self._flush_text()

    def reset(self) -> None:
        """Forget any partial sequence."""
        if self._state.in_sequence:
            logger.debug("Discarding partial output sequence %r", self._state.pre_parameter)
        self._state = OutputDecodeState(limits=self._state.limits)
        self._text.clear()


class InputStream:
    """
    Decodes keyboard input into ordinary bytes and key events.

    Usage:
        stream = InputStream()
        stream.on_data = lambda data: print(f"Got: {data!r}")
        stream.on_key = lambda event: print(f"Key: {event.key.name}")
        stream.process(b"\\x1b[A")
    """

    def __init__(self, limits: CodecLimits | None = None) -> None:
        self._state = (
            InputDecodeState() if limits is None else InputDecodeState(limits=limits)
        )
        self._data = bytearray()

        # Callbacks
        self.on_data: Callable[[bytes], None] | None = None
        self.on_key: Callable[[KeyEvent], None] | None = None

    @property
    def state(self) -> InputDecodeState:
        return self._state

    @property
    def in_sequence(self) -> bool:
        """Whether a key sequence is waiting for more bytes."""
        return self._state.in_sequence

    def _flush_data(self) -> None:
        if not self._data:
            return
        data = bytes(self._data)
        self._data.clear()
        if self.on_data:
            self.on_data(data)

    def _emit_key(self, event: KeyEvent) -> None:
        self._flush_data()
        if self.on_key:
            self.on_key(event)

    def process(self, data: str | bytes) -> None:
        """
        Process input data.

        Args:
            data: Input data as bytes, or str to be sent as UTF-8
        """
        for character in _as_bytes(data):
            result = decode_input(self._state, character)
            if result == ParseResult.NORMAL_CHARACTER:
                self._data.append(character)
            elif result == ParseResult.COMPLETE_COMMAND:
                self._emit_key(key_event(self._state))

        self._flush_data()

    def reset(self) -> None:
        """Forget any partial sequence."""
        if self._state.in_sequence:
            logger.debug("Discarding partial key sequence %r", self._state.sequence)
        self._state = InputDecodeState(limits=self._state.limits)
        self._data.clear()
