import pytest

from gambit import tables
from gambit.core import Move, MoveFlag, Piece, Turn

ALL_TABLES = [
    tables.WHITE_PAWN_ATTACKS,
    tables.BLACK_PAWN_ATTACKS,
    tables.KNIGHT_ATTACKS,
    tables.KING_ATTACKS,
    tables.BISHOP_ATTACKS,
    tables.ROOK_ATTACKS,
    tables.QUEEN_ATTACKS,
    tables.BISHOP_ATTACKS_NO_EDGES,
    tables.ROOK_ATTACKS_NO_EDGES,
    tables.QUEEN_ATTACKS_NO_EDGES,
]


def _targets(board):
    return [square for square in range(64) if board >> square & 1]


def test_constants():
    assert tables.NULL_EN_PASSANT == 64
    assert tables.MATE_SCORE == -32000
    assert tables.DRAW_SCORE == 0
    assert tables.MAX_PLY == 255
    # The null en passant square lies outside the six bits a move can hold.
    move = Move.encode(tables.NULL_EN_PASSANT, tables.NULL_EN_PASSANT, MoveFlag.NULL)
    assert move.src_square == 0
    assert move.dest_square == 0


def test_null_move_has_null_flag():
    assert tables.NULL_MOVE == Move.encode(64, 64, MoveFlag.NULL)
    assert tables.NULL_MOVE == Move()
    assert tables.NULL_MOVE.flag is MoveFlag.NULL
    assert tables.NULL_MOVE.piece_type is Piece.INVALID
    assert tables.NULL_MOVE.value == 0


@pytest.mark.parametrize(
    "table, square, expected",
    [
        (tables.WHITE_PAWN_ATTACKS, 8, 0x1030000),
        (tables.WHITE_PAWN_ATTACKS, 9, 0x2070000),
        (tables.WHITE_PAWN_ATTACKS, 14, 1088421888),
        (tables.WHITE_PAWN_ATTACKS, 15, 0x80C00000),
        (tables.WHITE_PAWN_ATTACKS, 16, 0x3000000),
        (tables.WHITE_PAWN_ATTACKS, 46, 0xE0000000000000),
        (tables.WHITE_PAWN_ATTACKS, 48, 0x300000000000000),
        (tables.WHITE_PAWN_ATTACKS, 0, 0),
        (tables.WHITE_PAWN_ATTACKS, 60, 0),
        (tables.BLACK_PAWN_ATTACKS, 8, 0x3),
        (tables.BLACK_PAWN_ATTACKS, 15, 0xC0),
        (tables.BLACK_PAWN_ATTACKS, 48, 0x30100000000),
        (tables.BLACK_PAWN_ATTACKS, 55, 0xC08000000000),
        (tables.BLACK_PAWN_ATTACKS, 3, 0),
        (tables.KNIGHT_ATTACKS, 0, 0x0000000000020400),
        (tables.KNIGHT_ATTACKS, 18, 0x0000000A1100110A),
        (tables.KNIGHT_ATTACKS, 63, 0x0020400000000000),
        (tables.KING_ATTACKS, 0, 0x0000000000000302),
        (tables.KING_ATTACKS, 9, 0x0000000000070507),
        (tables.KING_ATTACKS, 63, 0x40C0000000000000),
        (tables.BISHOP_ATTACKS, 0, 9241421688590303744),
        (tables.BISHOP_ATTACKS, 7, 72624976668147712),
        (tables.BISHOP_ATTACKS, 63, 18049651735527937),
        (tables.ROOK_ATTACKS, 0, 72340172838076926),
        (tables.ROOK_ATTACKS, 56, 18302911464433844481),
        (tables.ROOK_ATTACKS, 63, 9187484529235886208),
        (tables.QUEEN_ATTACKS, 0, 9313761861428380670),
        (tables.QUEEN_ATTACKS, 36, 10544115227674579473),
        (tables.QUEEN_ATTACKS, 63, 9205534180971414145),
        (tables.BISHOP_ATTACKS_NO_EDGES, 0, 18049651735527936),
        (tables.BISHOP_ATTACKS_NO_EDGES, 9, 18049651735527424),
        (tables.BISHOP_ATTACKS_NO_EDGES, 48, 2216338399232),
        (tables.ROOK_ATTACKS_NO_EDGES, 1, 565157600297596),
        (tables.ROOK_ATTACKS_NO_EDGES, 48, 35466950888980736),
        (tables.ROOK_ATTACKS_NO_EDGES, 55, 35607136465616896),
        (tables.ROOK_ATTACKS_NO_EDGES, 63, 9115426935197958144),
        (tables.QUEEN_ATTACKS_NO_EDGES, 0, 18332230535676798),
        (tables.QUEEN_ATTACKS_NO_EDGES, 63, 9133476586933486080),
    ],
)
def test_pinned_entries(table, square, expected):
    assert table[square] == expected


@pytest.mark.parametrize("table", ALL_TABLES)
def test_tables_cover_every_square_and_exclude_own_square(table):
    assert len(table) == 64
    for square, board in enumerate(table):
        assert 0 <= board < 1 << 64
        for target in _targets(board):
            move = Move.encode(square, target, MoveFlag.QUEEN)
            assert move.src_square == square
            assert move.dest_square == target
            assert move.src_square != move.dest_square


def test_queen_is_union_of_rook_and_bishop():
    for square in range(64):
        assert tables.QUEEN_ATTACKS[square] == (
            tables.ROOK_ATTACKS[square] | tables.BISHOP_ATTACKS[square]
        )
        assert tables.QUEEN_ATTACKS_NO_EDGES[square] == (
            tables.ROOK_ATTACKS_NO_EDGES[square] | tables.BISHOP_ATTACKS_NO_EDGES[square]
        )
        for target in _targets(tables.QUEEN_ATTACKS[square]):
            move = Move.encode(square, target, MoveFlag.QUEEN)
            assert move.piece_type is Piece.QUEEN
            assert (
                tables.ROOK_ATTACKS[move.src_square]
                | tables.BISHOP_ATTACKS[move.src_square]
            ) >> move.dest_square & 1


@pytest.mark.parametrize(
    "full, trimmed",
    [
        (tables.BISHOP_ATTACKS, tables.BISHOP_ATTACKS_NO_EDGES),
        (tables.ROOK_ATTACKS, tables.ROOK_ATTACKS_NO_EDGES),
        (tables.QUEEN_ATTACKS, tables.QUEEN_ATTACKS_NO_EDGES),
    ],
)
def test_no_edge_masks_are_subsets(full, trimmed):
    for square in range(64):
        assert trimmed[square] & ~full[square] == 0
        assert trimmed[square] != full[square]


@pytest.mark.parametrize("table", [tables.KNIGHT_ATTACKS, tables.KING_ATTACKS])
def test_leaper_attacks_are_symmetric(table):
    for a in range(64):
        for b in range(64):
            assert bool(table[a] >> b & 1) == bool(table[b] >> a & 1)


@pytest.mark.parametrize("square, count", [(0, 3), (1, 5), (27, 8)])
def test_king_attack_counts(square, count):
    moves = {
        Move.encode(square, target, MoveFlag.KING)
        for target in _targets(tables.KING_ATTACKS[square])
    }
    assert len(moves) == count
    assert all(move.piece_type is Piece.KING for move in moves)


def test_rook_attacks_are_symmetric():
    for a in range(64):
        for b in _targets(tables.ROOK_ATTACKS[a]):
            move = Move.encode(a, b, MoveFlag.ROOK)
            back = Move.encode(move.dest_square, move.src_square, MoveFlag.ROOK)
            assert back.dest_square == a
            assert tables.ROOK_ATTACKS[back.src_square] >> back.dest_square & 1


def test_pawn_tables_mirror_each_other():
    by_turn = {
        Turn.WHITE: tables.WHITE_PAWN_ATTACKS,
        Turn.BLACK: tables.BLACK_PAWN_ATTACKS,
    }
    white_table = by_turn[Turn.WHITE]
    black_table = by_turn[Turn.WHITE.opposite()]
    assert black_table is tables.BLACK_PAWN_ATTACKS
    for square in range(64):
        mirrored = (7 - square // 8) * 8 + square % 8
        flipped = 0
        for target in _targets(white_table[square]):
            flipped |= 1 << ((7 - target // 8) * 8 + target % 8)
        assert black_table[mirrored] == flipped