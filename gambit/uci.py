"""Parsing helpers for UCI command lines."""

from __future__ import annotations

import re
from collections.abc import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def split_args(line: str) -> list[str]:
    """Split a command line on single spaces.

    Consecutive spaces yield empty tokens, a trailing space yields none, and
    an empty line yields a single empty token.
    """
    tokens = line.split(" ")
    if line.endswith(" "):
        tokens.pop()
    return tokens


def hash_size_option(args: Sequence[str]) -> int:
    """Transposition table size in megabytes from a split ``setoption`` command.

    The third token must be ``Hash`` and the fourth must start with an integer.
    """
    if len(args) < 4 or args[2] != "Hash":
        raise ValueError("not a Hash option")
    match = _LEADING_INT.match(args[3])
    if match is None:
        raise ValueError(f"invalid hash size: {args[3]!r}")
    return int(match.group(1))