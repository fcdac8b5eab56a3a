"""Deterministic random numbers for pieces, magic blobs and grenades."""

from __future__ import annotations

import time

BLOB_TYPES = 7
MAGIC_ODDS = 19
FIRST_GRENADE = 40


class PieceRandom:
    """A linear congruential generator with separate piece streams per player."""

    def __init__(self, seed: int = 1) -> None:
        self._seed = seed & 0xFFFFFFFF
        self.player_seeds = [0, 0]
        self.piece_count = [0, 0]
        self.grenade_timer = [FIRST_GRENADE, FIRST_GRENADE]
        self.piece_map = list(range(1, BLOB_TYPES + 1))
        self.num_pieces = 0

    def _next(self) -> int:
        self._seed = (self._seed * 1103515245 + 12345) & 0xFFFFFFFF
        return (self._seed >> 16) & 0x7FFF

    def random_before(self, what: int) -> int:
        """Return a number from 0 up to but not including ``what``."""
        x = self._next() / 32768.0
        return int(x * what)

    def start(self, num_pieces: int, seed: int | None = None) -> None:
        """Begin a game using ``num_pieces`` colours and shuffle the colour map."""
        if seed is None:
            seed = int(time.monotonic() * 1000)
        self.num_pieces = num_pieces
        self.player_seeds = [seed & 0xFFFFFFFF] * 2
        self.piece_count = [0, 0]
        self.grenade_timer = [FIRST_GRENADE, FIRST_GRENADE]
        self.piece_map = list(range(1, BLOB_TYPES + 1))
        for index in range(BLOB_TYPES):
            other = self.random_before(BLOB_TYPES)
            self.piece_map[index], self.piece_map[other] = self.piece_map[other], self.piece_map[index]

    def add_extra_piece(self) -> None:
        """Allow one more colour to appear."""
        self.num_pieces += 1

    def _with_player_seed(self, player: int, what: int) -> int:
        saved = self._seed
        self._seed = self.player_seeds[player]
        result = self.random_before(what)
        self.player_seeds[player] = self._seed
        self._seed = saved
        return result

    def get_piece(self, player: int) -> int:
        """Draw the next blob colour from the player's own stream."""
        return self.piece_map[self._with_player_seed(player, self.num_pieces)]

    def get_magic(self, player: int) -> bool:
        """Decide from the player's stream whether the next piece is magic."""
        return self._with_player_seed(player, MAGIC_ODDS) == 0

    def get_grenade(self, player: int) -> bool:
        """Count a piece and report whether it is a grenade."""
        self.piece_count[player] += 1
        if self.piece_count[player] == self.grenade_timer[player]:
            self.grenade_timer[player] += self.grenade_timer[player] * 3 // 2
            return True
        return False