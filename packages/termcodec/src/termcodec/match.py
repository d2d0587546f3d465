"""
Prefix matching of accumulated sequence bytes against table rows.

A command row has a pre-parameter literal and a post-parameter literal. The
decoder accumulates bytes seen before any parameter into a pre-parameter run
and bytes seen after a parameter into a post-parameter run, then asks whether
those runs match a row fully, partially (more bytes could still complete it)
or not at all.
"""

from __future__ import annotations

from typing import Literal

from termcodec.types import CommandEntry, KeyEntry

MatchStatus = Literal["full", "partial", "none"]


def _common_prefix(run: bytes, literal: bytes) -> int:
    """Count leading bytes of ``run`` equal to ``literal``, stopping at its end."""
    index = 0
    limit = min(len(run), len(literal))
    while index < limit and run[index] == literal[index]:
        index += 1
    return index


def _match_tail(tail: bytes, literal: bytes) -> MatchStatus:
    """Match the unconsumed end of a pre-parameter run against a final literal."""
    index = _common_prefix(tail, literal)
    if index != len(tail):
        return "none"
    if index != len(literal):
        return "partial"
    return "full"


def match_command(pre: bytes, post: bytes, entry: CommandEntry) -> MatchStatus:
    """
    Match accumulated pre/post-parameter runs against one command row.

    The order of checks matters:

    1. If the pre-parameter run is longer than the row's pre-parameter
       literal and no post-parameter bytes exist, the final bytes were
       appended to the pre-parameter run because no parameter was seen.
       A row with an empty post-parameter literal accepts any single byte
       there (select character set). Otherwise the leftover bytes are
       matched against the post-parameter literal.
    2. A pre-parameter run that is a strict prefix of the row's literal, or
       a row whose post-parameter literal is empty, is a partial match.
    3. Otherwise the post-parameter run must match the post-parameter
       literal exactly for a full match.

    Args:
        pre: Bytes accumulated before any parameter
        post: Bytes accumulated after a parameter
        entry: Table row to test

    Returns:
        "full", "partial" or "none"
    """
    pattern = entry.pre_parameter
    index = _common_prefix(pre, pattern)
    if index != len(pre):
        if index == len(pattern) and not post:
            if not entry.post_parameter:
                return "full"
            return _match_tail(pre[index:], entry.post_parameter)
        return "none"

    if index != len(pattern):
        return "partial"

    # The next byte lands on the pre-parameter run and completes the row
    # through the first branch.
    if not entry.post_parameter:
        return "partial"

    index = _common_prefix(post, entry.post_parameter)
    if index != len(post):
        return "none"
    if index != len(entry.post_parameter):
        return "partial"
    return "full"


def match_key(sequence: bytes, entry: KeyEntry) -> MatchStatus:
    """Match bytes received after the escape against one key row."""
    index = _common_prefix(sequence, entry.sequence)
    if index != len(sequence):
        return "none"
    if index != len(entry.sequence):
        return "partial"
    return "full"
