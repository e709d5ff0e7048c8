from grid_invaders.config import GameConfig
from grid_invaders.levels.wave import create_invaders, initial_state
from grid_invaders.types import Cell
from tests.test_utils import as_cells


def test_create_invaders_staggered_rows() -> None:
    cells = as_cells(create_invaders())
    assert cells[:5] == [(0, 4), (0, 6), (0, 8), (1, 5), (1, 7)]
    assert len(cells) == 15
    assert max(row for row, _ in cells) == 5


def test_create_invaders_row_major_ascending_columns() -> None:
    cells = as_cells(create_invaders())
    assert cells == sorted(cells)


def test_create_invaders_respects_config() -> None:
    config = GameConfig(board_size=8, invader_rows=2, invader_column_offset=1)
    assert as_cells(create_invaders(config)) == [(0, 1), (0, 3), (1, 2), (1, 4)]


def test_initial_state() -> None:
    state = initial_state(seed=3)
    assert state.tick == 0
    assert state.score == 0
    assert state.player_lives == 3
    assert state.ship_column == 5
    assert state.invader_direction == 1
    assert state.shot_interval == 20
    assert not state.is_game_over
    assert len(state.invaders) == 15
    assert len(state.incoming_shots) == 0
    assert len(state.outgoing_shots) == 0
    assert state.seed == 3
    assert state.board[9][5] == Cell.PLAYER
    assert state.board[0][4] == Cell.INVADER


def test_initial_state_is_deterministic() -> None:
    assert initial_state() == initial_state()
