"""
Command and key tables for the VT220/xterm subset.

Both tables are scanned in order and the first full match wins, so the order
of rows is significant. ``ESC D`` and ``ESC [ D`` for example differ only in
whether the introducer was seen.
"""

from __future__ import annotations

from termcodec.types import CommandEntry, KeyEntry, TerminalCommand, TerminalKey

_C = TerminalCommand

COMMAND_TABLE: tuple[CommandEntry, ...] = (
    CommandEntry(b"[", b"A", _C.CURSOR_UP),
    CommandEntry(b"[", b"B", _C.CURSOR_DOWN),
    CommandEntry(b"[", b"C", _C.CURSOR_RIGHT),
    CommandEntry(b"[", b"D", _C.CURSOR_LEFT),
    CommandEntry(b"[", b"f", _C.CURSOR_MOVE),
    CommandEntry(b"[", b"H", _C.CURSOR_MOVE),
    CommandEntry(b"[", b"d", _C.SET_CURSOR_ROW_ABSOLUTE),
    CommandEntry(b"[", b"e", _C.CURSOR_DOWN),
    CommandEntry(b"[", b"G", _C.SET_CURSOR_COLUMN_ABSOLUTE),
    CommandEntry(b"", b"c", _C.RESET),
    CommandEntry(b"", b"D", _C.CURSOR_DOWN),
    CommandEntry(b"", b"E", _C.NEXT_LINE),
    CommandEntry(b"", b"M", _C.REVERSE_LINE_FEED),
    CommandEntry(b"", b"7", _C.SAVE_CURSOR_AND_ATTRIBUTES),
    CommandEntry(b"", b"8", _C.RESTORE_CURSOR_AND_ATTRIBUTES),
    CommandEntry(b"", b"H", _C.SET_HORIZONTAL_TAB),
    CommandEntry(b"[", b"g", _C.CLEAR_HORIZONTAL_TAB),
    CommandEntry(b"[", b"r", _C.SET_TOP_AND_BOTTOM_MARGIN),
    CommandEntry(b"[", b"J", _C.ERASE_IN_DISPLAY),
    CommandEntry(b"[?", b"J", _C.ERASE_IN_DISPLAY_SELECTIVE),
    CommandEntry(b"[", b"K", _C.ERASE_IN_LINE),
    CommandEntry(b"[?", b"K", _C.ERASE_IN_LINE_SELECTIVE),
    CommandEntry(b"[", b"L", _C.INSERT_LINES),
    CommandEntry(b"[", b"M", _C.DELETE_LINES),
    CommandEntry(b"[", b"@", _C.INSERT_CHARACTERS),
    CommandEntry(b"[", b"P", _C.DELETE_CHARACTERS),
    CommandEntry(b"[", b"X", _C.ERASE_CHARACTERS),
    CommandEntry(b"", b">", _C.KEYPAD_NUMERIC),
    CommandEntry(b"", b"=", _C.KEYPAD_APPLICATION),
    CommandEntry(b"[", b"l", _C.CLEAR_MODE),
    CommandEntry(b"[", b"h", _C.SET_MODE),
    CommandEntry(b"[?", b"l", _C.CLEAR_PRIVATE_MODE),
    CommandEntry(b"[?", b"h", _C.SET_PRIVATE_MODE),
    # Character set designators: any byte after the intermediate is the final
    CommandEntry(b"(", b"", _C.SELECT_G0_CHARACTER_SET),
    CommandEntry(b")", b"", _C.SELECT_G1_CHARACTER_SET),
    CommandEntry(b"*", b"", _C.SELECT_G2_CHARACTER_SET),
    CommandEntry(b"+", b"", _C.SELECT_G3_CHARACTER_SET),
    CommandEntry(b"[", b"m", _C.SELECT_GRAPHIC_RENDITION),
    CommandEntry(b"", b"c", _C.RESET),
    CommandEntry(b"[", b"!p", _C.SOFT_RESET),
    CommandEntry(b"[", b"c", _C.DEVICE_ATTRIBUTES_PRIMARY),
    CommandEntry(b"[", b">c", _C.DEVICE_ATTRIBUTES_SECONDARY),
    CommandEntry(b"[", b"S", _C.SCROLL_UP),
    CommandEntry(b"[", b"T", _C.SCROLL_DOWN),
    CommandEntry(b"#", b"3", _C.DOUBLE_LINE_HEIGHT_TOP_HALF),
    CommandEntry(b"#", b"4", _C.DOUBLE_LINE_HEIGHT_BOTTOM_HALF),
    CommandEntry(b"#", b"5", _C.SINGLE_WIDTH_LINE),
    CommandEntry(b"#", b"6", _C.DOUBLE_WIDTH_LINE),
)

_K = TerminalKey

KEY_TABLE: tuple[KeyEntry, ...] = (
    KeyEntry(b"[A", False, _K.UP),
    KeyEntry(b"[B", False, _K.DOWN),
    KeyEntry(b"[C", False, _K.RIGHT),
    KeyEntry(b"[D", False, _K.LEFT),
    KeyEntry(b"[2~", False, _K.INSERT),
    KeyEntry(b"[3~", False, _K.DELETE),
    KeyEntry(b"[1~", False, _K.HOME),
    KeyEntry(b"[4~", False, _K.END),
    KeyEntry(b"[5~", False, _K.PAGE_UP),
    KeyEntry(b"[6~", False, _K.PAGE_DOWN),
)


def find_command_entry(command: TerminalCommand) -> CommandEntry | None:
    """Return the first table row producing ``command``, if any."""
    for entry in COMMAND_TABLE:
        if entry.command == command:
            return entry
    return None


def find_key_entry(key: TerminalKey) -> KeyEntry | None:
    """Return the first table row producing ``key``, if any."""
    for entry in KEY_TABLE:
        if entry.key == key:
            return entry
    return None
