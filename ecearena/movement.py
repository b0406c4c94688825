"""Movement of players on the arena grid."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, Optional

from .players import Player

CELL_SIZE = 50
BOARD_LEFT = 110
BOARD_WIDTH = 690
BOARD_HEIGHT = 600
ZONE_REACH = 3


class ZoneCell(NamedTuple):
    """A cell of the movement zone and whether a player stands on it."""

    row: int
    column: int
    occupied: bool


def manhattan_distance(row1: int, col1: int, row2: int, col2: int) -> int:
    """Number of orthogonal steps between two cells."""
    return abs(row1 - row2) + abs(col1 - col2)


def is_cell_occupied(row: int, col: int, players: Sequence[Player], current: int) -> bool:
    """True when a player other than the one at index ``current`` stands on the cell."""
    return any(
        index != current and player.row == row and player.column == col
        for index, player in enumerate(players)
    )


def grid_size(cell_size: int = CELL_SIZE) -> tuple[int, int]:
    """Return the (rows, columns) of the playable grid for a cell size."""
    return BOARD_HEIGHT // cell_size, BOARD_WIDTH // cell_size


def movement_zone(row: int, col: int, players: Sequence[Player],
                  cell_size: int = CELL_SIZE) -> list[ZoneCell]:
    """Cells one to three steps away from (row, col), clipped to the grid."""
    rows, columns = grid_size(cell_size)
    row_range = range(max(row - ZONE_REACH, 0), min(row + ZONE_REACH, rows - 1) + 1)
    col_range = range(max(col - ZONE_REACH, 0), min(col + ZONE_REACH, columns - 1) + 1)
    taken = {(player.row, player.column) for player in players}
    return [
        ZoneCell(r, c, (r, c) in taken)
        for r in row_range
        for c in col_range
        if 0 < manhattan_distance(row, col, r, c) <= ZONE_REACH
    ]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def cell_at(x: int, y: int, cell_size: int = CELL_SIZE) -> tuple[int, int]:
    """Map a pixel position to a (row, column) cell, truncating toward zero."""
    return _truncating_div(y, cell_size), _truncating_div(x - BOARD_LEFT, cell_size)


class MoveController:
    """Two-click movement: select the current player, then click a destination."""

    def __init__(self, cell_size: int = CELL_SIZE) -> None:
        self.cell_size = cell_size
        self.selected: Optional[int] = None

    def click(self, x: int, y: int, players: Sequence[Player], current: int) -> bool:
        """Handle a mouse press at (x, y); return True when a player moved."""
        row, col = cell_at(x, y, self.cell_size)
        rows, columns = grid_size(self.cell_size)
        if not (0 <= row < rows and 0 <= col < columns):
            self.selected = None
            return False
        if self.selected is None:
            player = players[current]
            if player.row == row and player.column == col:
                self.selected = current
            return False
        mover = players[self.selected]
        distance = manhattan_distance(mover.row, mover.column, row, col)
        moved = False
        if not is_cell_occupied(row, col, players, self.selected) and distance <= mover.mp:
            mover.row = row
            mover.column = col
            mover.mp -= distance
            moved = True
        self.selected = None
        return moved

    def zone(self, players: Sequence[Player]) -> list[ZoneCell]:
        """The movement zone of the selected player, empty when none is selected."""
        if self.selected is None:
            return []
        player = players[self.selected]
        return movement_zone(player.row, player.column, players, self.cell_size)

    def reset(self) -> None:
        """Forget any selected player."""
        self.selected = None