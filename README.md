# gambit

Pure-Python building blocks for a bitboard chess engine. The package has no
dependencies outside the standard library.

Squares are numbered from 0 (a1) to 63 (h8), rank by rank. A bitboard is a
Python `int` that holds 64 bits.

## Modules

### `gambit.core`

- Enums: `Piece` (`PAWN` … `KING`, `INVALID = -1`), `PieceValue` (centipawns),
  `CastlingRight`, `Turn` (with `Turn.opposite()`), `MoveFlag` and `NodeType`.
- `Move` is a frozen move packed into 16 bits. The source square takes 6 bits,
  the destination takes 6 and the flag takes 4. Build one with
  `Move.encode(src_square, dest_square, flag)`. Read it back through the
  properties `src_square`, `dest_square`, `flag` and `piece_type`. A flag value
  that is not known reads as `MoveFlag.NULL` and has piece type
  `Piece.INVALID`. Two moves are equal, and hash alike, when their source,
  destination and flag match.
- Record dataclasses: `EvaluatedMove`, `TTEntry`, `MvvLvaLog`, `PV` and
  `MagicEntry`.

### `gambit.tables`

- Attack tables are tuples of 64 bitboards. None of them includes the square
  the piece stands on:
  - `WHITE_PAWN_ATTACKS` and `BLACK_PAWN_ATTACKS` hold forward pushes and
    diagonal captures. The double push is included from the starting rank. Both
    tables are empty on the first and last ranks.
  - `KNIGHT_ATTACKS` and `KING_ATTACKS`.
  - `BISHOP_ATTACKS`, `ROOK_ATTACKS` and `QUEEN_ATTACKS` hold full rays on an
    empty board.
  - `BISHOP_ATTACKS_NO_EDGES`, `ROOK_ATTACKS_NO_EDGES` and
    `QUEEN_ATTACKS_NO_EDGES` hold the same rays without their last square at
    the board edge.
- Constants: `NULL_EN_PASSANT` (64), `NULL_MOVE`, `MATE_SCORE` (-32000),
  `DRAW_SCORE` (0) and `MAX_PLY` (255).

### `gambit.utils`

- Shifts: `shift_up`, `shift_down`, `shift_left` and `shift_right`. Bits that
  are pushed past bit 63 are dropped.
- `piece_is_at_square(board, square)`, `count_bits(board)` and
  `clear_bit(board, index)`.
- `ls1b_index(board)` gives the index of the lowest set bit, or 64 for an empty
  board.
- `format_bitboard(board, board_center=64)` returns a text picture of the board
  with rank 8 on top. The `board_center` square is marked `X`.
- `encode_move(piece, src_square, dest_square, en_passant_target)` works out the
  flag from the piece and the squares:
  - a pawn moving 16 squares gets the double push flag;
  - a pawn landing on the en passant target gets the en passant flag;
  - a king moving 2 squares gets the castling flag.
- `square_to_board_notation(square)` turns a square into a name such as `e4`.
  `move_to_board_notation(move)` gives long algebraic notation such as `e2e4`,
  or `e7e8q` for a promotion.

### `gambit.zobrist`

- `MersenneTwister64(seed)` is the MT19937-64 generator. Call `next()` or
  iterate it to get 64-bit outputs.
- `Zobrist(seed=DEFAULT_SEED)` fills its key tables from that generator in this
  order:
  1. pieces, 64 squares × 12 kinds, with kinds 0–5 white and 6–11 black;
  2. 64 en passant keys;
  3. 16 castling-rights keys;
  4. the side-to-move key.

  Look keys up with `piece(piece_type, square)`, `en_passant(square)`,
  `castling_rights(rights)` and `side_to_move()`. An index out of range raises
  `IndexError`.

### `gambit.timer`

`Timer` budgets the time for one turn. Clock times are in milliseconds.

- `set_fields(time, increment)` sets the clock and the increment. It rejects
  negative values with `ValueError`.
- `time_allowance()` returns `time // 20 + increment // 2`.
- `start()` starts the turn. After that, `turn_duration()` gives the budget in
  microseconds and `is_out_of_time()` reports whether the budget has run out.
  Both raise `RuntimeError` if the timer was never started.
- You can inject a `clock` callable that returns nanoseconds. The default is
  `time.monotonic_ns`.

### `gambit.uci`

- `split_args(line)` splits on single spaces. Repeated spaces give empty tokens.
  A trailing space gives no token. An empty line gives `[""]`.
- `hash_size_option(args)` reads the table size in megabytes from a split
  command whose third token is `Hash`. The size is the leading integer of the
  fourth token. Any other input raises `ValueError`.

## Example

```python
from gambit.core import Move, MoveFlag, Piece
from gambit.utils import encode_move, move_to_board_notation

move = Move.encode(12, 28, MoveFlag.PAWN_TWO_FORWARD)
print(move_to_board_notation(move))                  # e2e4

castle = encode_move(Piece.KING, 4, 6, 64)
print(castle.flag is MoveFlag.CASTLING)              # True
```

```python
from gambit.zobrist import Zobrist

keys = Zobrist()
key = keys.piece(0, 12) ^ keys.side_to_move()
```

```python
from gambit.uci import split_args, hash_size_option

print(hash_size_option(split_args("setoption Hash Hash 16")))   # 16
```

## What it does not do

This package is a set of pieces, not a playing engine:

- It has no board or position type.
- It has no move generator, legality checks or evaluation.
- It has no search and no transposition table storage.
- It has no UCI command loop and installs no command.

The UCI helpers only split and read command lines. Nothing here answers `uci`,
`position` or `go`.

## Tests

```
pip install ".[test]"
pytest
```