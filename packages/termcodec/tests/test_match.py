"""
Tests for termcodec/match.py - table row matching.
"""

import pytest

from termcodec.match import match_command, match_key
from termcodec.types import CommandEntry, KeyEntry, TerminalCommand, TerminalKey

CURSOR_UP = CommandEntry(b"[", b"A", TerminalCommand.CURSOR_UP)
SAVE_CURSOR = CommandEntry(b"", b"7", TerminalCommand.SAVE_CURSOR_AND_ATTRIBUTES)
SELECT_G0 = CommandEntry(b"(", b"", TerminalCommand.SELECT_G0_CHARACTER_SET)
SOFT_RESET = CommandEntry(b"[", b"!p", TerminalCommand.SOFT_RESET)
PRIVATE_MODE = CommandEntry(b"[?", b"h", TerminalCommand.SET_PRIVATE_MODE)


class TestMatchCommandWithParameters:
    """Runs where parameters split the pre- and post-parameter bytes."""

    def test_full_match(self):
        assert match_command(b"[", b"A", CURSOR_UP) == "full"

    def test_wrong_final(self):
        assert match_command(b"[", b"B", CURSOR_UP) == "none"

    def test_multi_byte_final_partial(self):
        assert match_command(b"[", b"!", SOFT_RESET) == "partial"
        assert match_command(b"[", b"!p", SOFT_RESET) == "full"

    def test_post_run_too_long(self):
        assert match_command(b"[", b"AB", CURSOR_UP) == "none"

    def test_private_introducer(self):
        assert match_command(b"[?", b"h", PRIVATE_MODE) == "full"
        assert match_command(b"[?", b"l", PRIVATE_MODE) == "none"


class TestMatchCommandPrefix:
    """Runs that have not reached the final byte yet."""

    def test_pre_run_prefix_of_entry(self):
        assert match_command(b"[", b"", PRIVATE_MODE) == "partial"

    def test_pre_run_exact_waits_for_final(self):
        assert match_command(b"[?", b"", PRIVATE_MODE) == "partial"

    def test_empty_post_literal_is_partial(self):
        assert match_command(b"(", b"", SELECT_G0) == "partial"

    def test_mismatched_pre_run(self):
        assert match_command(b"#", b"", CURSOR_UP) == "none"


class TestMatchCommandTail:
    """Runs where the final byte was appended to the pre-parameter run."""

    def test_final_after_introducer(self):
        assert match_command(b"[A", b"", CURSOR_UP) == "full"

    def test_bare_final(self):
        assert match_command(b"7", b"", SAVE_CURSOR) == "full"

    def test_bare_final_mismatch(self):
        assert match_command(b"8", b"", SAVE_CURSOR) == "none"

    def test_character_set_wildcard(self):
        assert match_command(b"(B", b"", SELECT_G0) == "full"
        assert match_command(b"(0", b"", SELECT_G0) == "full"

    def test_wildcard_needs_empty_post_run(self):
        assert match_command(b"(B", b"x", SELECT_G0) == "none"

    def test_tail_prefix_of_multi_byte_final(self):
        assert match_command(b"[!", b"", SOFT_RESET) == "partial"
        assert match_command(b"[!p", b"", SOFT_RESET) == "full"

    def test_tail_longer_than_final(self):
        assert match_command(b"[AB", b"", CURSOR_UP) == "none"

    def test_bare_entry_with_pre_run_as_post(self):
        assert match_command(b"", b"7", SAVE_CURSOR) == "full"
        assert match_command(b"", b"[7", SAVE_CURSOR) == "none"


class TestMatchKey:
    """Tests for match_key function."""

    DELETE = KeyEntry(b"[3~", False, TerminalKey.DELETE)

    @pytest.mark.parametrize("sequence", [b"[", b"[3"])
    def test_partial(self, sequence):
        assert match_key(sequence, self.DELETE) == "partial"

    def test_full(self):
        assert match_key(b"[3~", self.DELETE) == "full"

    def test_mismatch(self):
        assert match_key(b"[4", self.DELETE) == "none"

    def test_longer_than_entry(self):
        assert match_key(b"[3~~", self.DELETE) == "none"
