"""Core chess types: pieces, sides, move encoding and search records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Piece(IntEnum):
    """Piece kinds, independent of colour."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    INVALID = -1


class PieceValue(IntEnum):
    """Material values in centipawns."""

    PAWN = 100
    KNIGHT = 300
    BISHOP = 300
    ROOK = 500
    QUEEN = 900


class CastlingRight(IntEnum):
    """Bit positions of the four castling rights."""

    WHITE_SHORT = 0
    WHITE_LONG = 1
    BLACK_SHORT = 2
    BLACK_LONG = 3


class Turn(IntEnum):
    """Side to move."""

    WHITE = 0
    BLACK = 1

    def opposite(self) -> Turn:
        """Return the other side."""
        return Turn(self.value ^ 1)


@dataclass
class MagicEntry:
    """One entry of a magic bitboard lookup table."""

    mask: int
    magic_number: int
    index_bits: int


class MoveFlag(IntEnum):
    """Four-bit flag stored in the low bits of an encoded move."""

    NULL = 0x00
    PAWN = 0x01
    KNIGHT = 0x02
    BISHOP = 0x03
    ROOK = 0x04
    QUEEN = 0x05
    KING = 0x06
    PAWN_TWO_FORWARD = 0x07
    EN_PASSANT = 0x08
    KNIGHT_PROMOTION = 0x09
    BISHOP_PROMOTION = 0x0A
    ROOK_PROMOTION = 0x0B
    QUEEN_PROMOTION = 0x0C
    CASTLING = 0x0D


_FLAG_PIECES = {
    MoveFlag.PAWN: Piece.PAWN,
    MoveFlag.KNIGHT: Piece.KNIGHT,
    MoveFlag.BISHOP: Piece.BISHOP,
    MoveFlag.ROOK: Piece.ROOK,
    MoveFlag.QUEEN: Piece.QUEEN,
    MoveFlag.KING: Piece.KING,
    MoveFlag.PAWN_TWO_FORWARD: Piece.PAWN,
    MoveFlag.EN_PASSANT: Piece.PAWN,
    MoveFlag.KNIGHT_PROMOTION: Piece.KNIGHT,
    MoveFlag.BISHOP_PROMOTION: Piece.BISHOP,
    MoveFlag.ROOK_PROMOTION: Piece.ROOK,
    MoveFlag.QUEEN_PROMOTION: Piece.QUEEN,
    MoveFlag.CASTLING: Piece.KING,
}

_KNOWN_FLAGS = frozenset(flag.value for flag in MoveFlag)


@dataclass(frozen=True, eq=False)
class Move:
    """A move packed into 16 bits: source (6), destination (6), flag (4)."""

    value: int = 0

    @classmethod
    def encode(cls, src_square: int, dest_square: int, flag: MoveFlag | int) -> Move:
        """Pack a move; squares keep their low six bits, the flag its low four."""
        packed = (int(flag) & 0x0F) | ((dest_square & 0x3F) << 4) | ((src_square & 0x3F) << 10)
        return cls(packed)

    @property
    def flag(self) -> MoveFlag:
        """The move flag, or NULL when the stored bits are not a known flag."""
        bits = self.value & 0x0F
        return MoveFlag(bits) if bits in _KNOWN_FLAGS else MoveFlag.NULL

    @property
    def piece_type(self) -> Piece:
        """The piece kind implied by the flag, INVALID when there is none."""
        return _FLAG_PIECES.get(self.flag, Piece.INVALID)

    @property
    def src_square(self) -> int:
        return (self.value >> 10) & 0x3F

    @property
    def dest_square(self) -> int:
        return (self.value >> 4) & 0x3F

    def _key(self) -> tuple[int, int, MoveFlag]:
        return (self.src_square, self.dest_square, self.flag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass
class EvaluatedMove:
    """A move paired with its evaluation."""

    move: Move
    eval: int


class NodeType(IntEnum):
    """Bound type of a transposition table score."""

    EXACT = 0
    UPPER = 1
    LOWER = 2
    NULL_NODE = -1


@dataclass
class TTEntry:
    """A transposition table entry."""

    zobrist_key: int = 0
    score: int = 0
    best_move: Move = field(default_factory=Move)
    depth: int = 0
    node_type: NodeType = NodeType.NULL_NODE


@dataclass
class MvvLvaLog:
    """A move with its most-valuable-victim / least-valuable-attacker score."""

    move: Move
    mvv_lva_score: int


@dataclass
class PV:
    """A principal variation."""

    num_of_moves: int = 0
    moves: list[Move] = field(default_factory=list)