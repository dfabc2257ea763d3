"""Bitboard helpers, move encoding and algebraic notation."""

from __future__ import annotations

from gambit.core import Move, MoveFlag, Piece
from gambit.tables import NULL_EN_PASSANT

_BOARD_MASK = (1 << 64) - 1

_PIECE_FLAGS = {
    Piece.KNIGHT: MoveFlag.KNIGHT,
    Piece.BISHOP: MoveFlag.BISHOP,
    Piece.ROOK: MoveFlag.ROOK,
    Piece.QUEEN: MoveFlag.QUEEN,
}

_PROMOTION_SUFFIXES = {
    MoveFlag.KNIGHT_PROMOTION: "n",
    MoveFlag.BISHOP_PROMOTION: "b",
    MoveFlag.ROOK_PROMOTION: "r",
    MoveFlag.QUEEN_PROMOTION: "q",
}


def shift_up(board: int) -> int:
    """Move every bit up one rank; bits leaving the board are dropped."""
    return (board << 8) & _BOARD_MASK


def shift_down(board: int) -> int:
    """Move every bit down one rank."""
    return board >> 8


def shift_left(board: int) -> int:
    """Move every bit one index higher (towards the h-file)."""
    return (board << 1) & _BOARD_MASK


def shift_right(board: int) -> int:
    """Move every bit one index lower (towards the a-file)."""
    return board >> 1


def piece_is_at_square(board: int, square: int) -> bool:
    """True when the bit for ``square`` is set."""
    return bool(board & (1 << square))


def count_bits(board: int) -> int:
    """Number of set bits, i.e. pieces on the bitboard."""
    return bin(board & _BOARD_MASK).count("1")


def ls1b_index(board: int) -> int:
    """Index of the least significant set bit, or 64 for an empty board."""
    board &= _BOARD_MASK
    if board == 0:
        return NULL_EN_PASSANT
    return (board & -board).bit_length() - 1


def format_bitboard(board: int, board_center: int = 64) -> str:
    """Render a bitboard with rank 8 on top; ``board_center`` is drawn as X."""
    rows = []
    for rank in range(8):
        cells = []
        for file in range(8):
            square = rank * 8 + file
            if square == board_center:
                cells.append("X ")
            elif (board >> square) & 1:
                cells.append("1 ")
            else:
                cells.append("0 ")
        rows.append("".join(cells) + f"|{rank + 1} \n")
    return "".join(reversed(rows)) + "----------------\n" + "A B C D E F G H"


def clear_bit(board: int, index: int) -> int:
    """Return ``board`` with the bit at ``index`` cleared."""
    return board & ~(1 << index) & _BOARD_MASK


def encode_move(piece: Piece, src_square: int, dest_square: int, en_passant_target: int) -> Move:
    """Build a move, inferring its flag from the piece and the squares."""
    if piece == Piece.PAWN:
        if abs(src_square - dest_square) == 16:
            flag = MoveFlag.PAWN_TWO_FORWARD
        elif dest_square == en_passant_target:
            flag = MoveFlag.EN_PASSANT
        else:
            flag = MoveFlag.PAWN
    elif piece == Piece.KING:
        flag = MoveFlag.CASTLING if abs(src_square - dest_square) == 2 else MoveFlag.KING
    else:
        flag = _PIECE_FLAGS.get(piece, MoveFlag.NULL)
    return Move.encode(src_square, dest_square, flag)


def square_to_board_notation(square: int) -> str:
    """Algebraic name of a square, e.g. 0 -> 'a1'."""
    return chr(ord("a") + square % 8) + chr(ord("1") + square // 8)


def move_to_board_notation(move: Move) -> str:
    """Long algebraic notation of a move, with a promotion suffix if any."""
    return (
        square_to_board_notation(move.src_square)
        + square_to_board_notation(move.dest_square)
        + _PROMOTION_SUFFIXES.get(move.flag, "")
    )