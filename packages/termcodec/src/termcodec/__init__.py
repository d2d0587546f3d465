"""
termcodec: VT220/xterm escape sequence decoder and encoder

Decodes terminal output into commands and terminal input into keys, one byte
at a time, and encodes commands and keys back into their byte sequences.
"""

from termcodec.types import (
    ESCAPE,
    INTRODUCER,
    PARAMETER_SEPARATOR,
    CommandEntry,
    CommandEvent,
    CommandFlags,
    InputDecodeState,
    KeyEntry,
    KeyEvent,
    KeyFlags,
    OutputDecodeState,
    ParseResult,
    TerminalCommand,
    TerminalKey,
)
from termcodec.config import CodecLimits, get_codec_limits
from termcodec.errors import (
    BufferTooSmallError,
    EncodeError,
    InvalidFinalError,
    TermCodecError,
    UnknownCommandError,
    UnknownKeyError,
)
from termcodec.match import MatchStatus, match_command, match_key
from termcodec.tables import COMMAND_TABLE, KEY_TABLE, find_command_entry, find_key_entry
from termcodec.commands import (
    command_event,
    decode_output,
    encode_command,
    encode_output,
    normalize_parameters,
)
from termcodec.keys import decode_input, encode_input, encode_key, key_event
from termcodec.streams import InputStream, OutputStream

__all__ = [
    "ESCAPE",
    "INTRODUCER",
    "PARAMETER_SEPARATOR",
    "CommandEntry",
    "CommandEvent",
    "CommandFlags",
    "InputDecodeState",
    "KeyEntry",
    "KeyEvent",
    "KeyFlags",
    "OutputDecodeState",
    "ParseResult",
    "TerminalCommand",
    "TerminalKey",
    "CodecLimits",
    "get_codec_limits",
    "BufferTooSmallError",
    "EncodeError",
    "InvalidFinalError",
    "TermCodecError",
    "UnknownCommandError",
    "UnknownKeyError",
    "MatchStatus",
    "match_command",
    "match_key",
    "COMMAND_TABLE",
    "KEY_TABLE",
    "find_command_entry",
    "find_key_entry",
    "command_event",
    "decode_output",
    "encode_command",
    "encode_output",
    "normalize_parameters",
    "decode_input",
    "encode_input",
    "encode_key",
    "key_event",
    "InputStream",
    "OutputStream",
]
