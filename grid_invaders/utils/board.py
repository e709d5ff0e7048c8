"""Board rasterization helpers.

The board is a projection of entity positions, rebuilt from scratch on every
call; nothing here reads a previous board. Layers are painted in a fixed
order (player, invaders, incoming shots, outgoing shots) so a later layer wins
a shared cell.
"""

from typing import Iterable, List
import numpy as np
from grid_invaders.components import Position
from grid_invaders.state import State
from grid_invaders.types import Board, Cell

CELL_GLYPHS = {
    Cell.EMPTY: ".",
    Cell.PLAYER: "A",
    Cell.INVADER: "W",
    Cell.SHOT: "|",
}


def empty_board(size: int) -> Board:
    """Return a ``size x size`` board of ``Cell.EMPTY``."""
    return tuple(tuple(Cell.EMPTY for _ in range(size)) for _ in range(size))


def _paint(grid: List[List[Cell]], positions: Iterable[Position], cell: Cell) -> None:
    size = len(grid)
    for pos in positions:
        if 0 <= pos.row < size and 0 <= pos.col < size:
            grid[pos.row][pos.col] = cell


def rasterize(state: State) -> Board:
    """Project ``state`` entities onto a fresh board."""
    size = state.size
    grid: List[List[Cell]] = [list(row) for row in empty_board(size)]
    _paint(grid, [Position(state.player_row, state.ship_column)], Cell.PLAYER)
    _paint(grid, state.invaders, Cell.INVADER)
    _paint(grid, state.incoming_shots, Cell.SHOT)
    _paint(grid, state.outgoing_shots, Cell.SHOT)
    return tuple(tuple(row) for row in grid)


def board_to_str(board: Board) -> str:
    """Render a board as text, one line per row."""
    return "\n".join("".join(CELL_GLYPHS[cell] for cell in row) for row in board)


def board_to_array(board: Board) -> np.ndarray:
    """Convert a board to a ``uint8`` array of ``Cell`` values."""
    return np.array(board, dtype=np.uint8).reshape(len(board), len(board))
