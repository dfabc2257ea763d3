"""Zobrist hashing keys drawn from a 64-bit Mersenne Twister."""

from __future__ import annotations

from collections.abc import Iterator

_MASK64 = (1 << 64) - 1

DEFAULT_SEED = 18446744073709551615

_PIECE_KINDS = 12  # six white piece kinds followed by six black
_SQUARES = 64
_CASTLING_COMBINATIONS = 16


class MersenneTwister64:
    """The MT19937-64 pseudo-random generator, bit for bit."""

    _N = 312
    _M = 156
    _MATRIX_A = 0xB5026F5AA96619E9
    _UPPER_MASK = 0xFFFFFFFF80000000
    _LOWER_MASK = 0x7FFFFFFF

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK64]
        for i in range(1, self._N):
            previous = state[-1]
            state.append((6364136223846793005 * (previous ^ (previous >> 62)) + i) & _MASK64)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (state[i] & self._UPPER_MASK) | (state[(i + 1) % n] & self._LOWER_MASK)
            value = state[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= self._MATRIX_A
            state[i] = value
        self._index = 0

    def next(self) -> int:
        """Return the next 64-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & _MASK64

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


class Zobrist:
    """Random keys for pieces on squares, en passant files, castling rights and side to move."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        generator = MersenneTwister64(seed)
        self._pieces = [
            [generator.next() for _ in range(_PIECE_KINDS)] for _ in range(_SQUARES)
        ]
        self._en_passant = [generator.next() for _ in range(_SQUARES)]
        self._castling_rights = [generator.next() for _ in range(_CASTLING_COMBINATIONS)]
        self._side_to_move = generator.next()

    def piece(self, piece_type: int, square: int) -> int:
        """Key for a piece kind (0-5 white, 6-11 black) on a square."""
        if not (0 <= square < _SQUARES and 0 <= piece_type < _PIECE_KINDS):
            raise IndexError(
                f"no piece key for type {piece_type} on square {square}"
            )
        return self._pieces[square][piece_type]

    def en_passant(self, square: int) -> int:
        """Key for an en passant target square."""
        if not 0 <= square < _SQUARES:
            raise IndexError(f"no en passant key for square {square}")
        return self._en_passant[square]

    def castling_rights(self, rights: int) -> int:
        """Key for a four-bit combination of castling rights."""
        if not 0 <= rights < _CASTLING_COMBINATIONS:
            raise IndexError(f"no castling key for rights {rights}")
        return self._castling_rights[rights]

    def side_to_move(self) -> int:
        """Key toggled when the side to move changes."""
        return self._side_to_move