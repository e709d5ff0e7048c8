from grid_invaders.actions import Key
from grid_invaders.systems.ship import clamp_ship_system, fire_system, ship_system
from tests.test_utils import as_cells, make_state


def test_ship_moves_left_and_right() -> None:
    state = make_state(ship_column=5)
    assert ship_system(state, Key.LEFT).ship_column == 4
    assert ship_system(state, Key.RIGHT).ship_column == 6


def test_ship_ignores_fire_and_none() -> None:
    state = make_state(ship_column=5)
    assert ship_system(state, Key.FIRE) is state
    assert ship_system(state, Key.NONE) is state


def test_ship_move_is_not_clamped_until_clamp_system() -> None:
    state = make_state(ship_column=0)
    moved = ship_system(state, Key.LEFT)
    assert moved.ship_column == -1
    assert clamp_ship_system(moved).ship_column == 0


def test_clamp_upper_bound() -> None:
    state = make_state(ship_column=12)
    assert clamp_ship_system(state).ship_column == 9


def test_clamp_is_noop_in_range() -> None:
    state = make_state(ship_column=9)
    assert clamp_ship_system(state) is state


def test_fire_appends_shot_in_front_of_ship() -> None:
    state = make_state(ship_column=3, outgoing_shots=[(4, 4)])
    fired = fire_system(state, Key.FIRE)
    assert as_cells(fired.outgoing_shots) == [(4, 4), (8, 3)]


def test_fire_ignores_other_keys() -> None:
    state = make_state()
    assert fire_system(state, Key.LEFT) is state
