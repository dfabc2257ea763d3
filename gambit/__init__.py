"""Bitboard chess engine components: packed moves, attack tables, Zobrist keys, turn timing and UCI parsing helpers."""

__version__ = "1.19.2"
__all__ = ["core", "tables", "timer", "uci", "utils", "zobrist"]