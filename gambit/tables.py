"""Precomputed attack bitboards and engine-wide constants.

Squares are numbered 0 (a1) to 63 (h8), rank by rank. Every attack table
excludes the square the piece stands on.
"""

from __future__ import annotations

from collections.abc import Iterable

from gambit.core import Move, MoveFlag

NULL_EN_PASSANT = 64
NULL_MOVE = Move.encode(64, 64, MoveFlag.NULL)
MATE_SCORE = -32000  # negated when returned from a mated node
DRAW_SCORE = 0
MAX_PLY = 255

_KNIGHT_STEPS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
_KING_STEPS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))
_ROOK_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_BISHOP_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def _mask(squares: Iterable[int]) -> int:
    board = 0
    for square in squares:
        board |= 1 << square
    return board


def _leaper(square: int, steps: Iterable[tuple[int, int]]) -> int:
    file, rank = square % 8, square // 8
    return _mask(
        (rank + dr) * 8 + file + df
        for df, dr in steps
        if _on_board(file + df, rank + dr)
    )


def _ray(square: int, df: int, dr: int) -> list[int]:
    file, rank = square % 8 + df, square // 8 + dr
    squares = []
    while _on_board(file, rank):
        squares.append(rank * 8 + file)
        file += df
        rank += dr
    return squares


def _slider(square: int, directions: Iterable[tuple[int, int]], with_edges: bool) -> int:
    board = 0
    for df, dr in directions:
        ray = _ray(square, df, dr)
        board |= _mask(ray if with_edges else ray[:-1])
    return board


def _pawn(square: int, forward: int, start_rank: int) -> int:
    """Pushes and captures for a pawn that moves ``forward`` ranks per step."""
    file, rank = square % 8, square // 8
    if rank in (0, 7):
        return 0
    steps = [(0, forward), (-1, forward), (1, forward)]
    if rank == start_rank:
        steps.append((0, 2 * forward))
    return _leaper(square, steps)


def _table(build) -> tuple[int, ...]:
    return tuple(build(square) for square in range(64))


WHITE_PAWN_ATTACKS = _table(lambda sq: _pawn(sq, 1, 1))
BLACK_PAWN_ATTACKS = _table(lambda sq: _pawn(sq, -1, 6))

KNIGHT_ATTACKS = _table(lambda sq: _leaper(sq, _KNIGHT_STEPS))
KING_ATTACKS = _table(lambda sq: _leaper(sq, _KING_STEPS))

BISHOP_ATTACKS = _table(lambda sq: _slider(sq, _BISHOP_DIRECTIONS, True))
ROOK_ATTACKS = _table(lambda sq: _slider(sq, _ROOK_DIRECTIONS, True))
QUEEN_ATTACKS = tuple(b | r for b, r in zip(BISHOP_ATTACKS, ROOK_ATTACKS))

# Rays stop short of the board edge: the relevant-occupancy masks.
BISHOP_ATTACKS_NO_EDGES = _table(lambda sq: _slider(sq, _BISHOP_DIRECTIONS, False))
ROOK_ATTACKS_NO_EDGES = _table(lambda sq: _slider(sq, _ROOK_DIRECTIONS, False))
QUEEN_ATTACKS_NO_EDGES = tuple(
    b | r for b, r in zip(BISHOP_ATTACKS_NO_EDGES, ROOK_ATTACKS_NO_EDGES)
)