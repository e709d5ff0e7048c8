from grid_invaders.systems.damage import damage_system
from tests.test_utils import make_state


def test_shot_on_ship_costs_a_life() -> None:
    state = make_state(ship_column=4, incoming_shots=[(9, 4)])
    assert damage_system(state).player_lives == 2


def test_two_shots_on_ship_cost_one_life() -> None:
    state = make_state(ship_column=4, incoming_shots=[(9, 4), (9, 4)])
    assert damage_system(state).player_lives == 2


def test_shot_beside_ship_is_harmless() -> None:
    state = make_state(ship_column=4, incoming_shots=[(9, 5), (8, 4)])
    assert damage_system(state) is state


def test_lives_can_go_negative() -> None:
    state = make_state(player_lives=0, ship_column=1, incoming_shots=[(9, 1)])
    assert damage_system(state).player_lives == -1


def test_shot_on_player_row_at_ship_column_only() -> None:
    state = make_state(ship_column=0, incoming_shots=[(9, 1), (9, 0)])
    assert damage_system(state).player_lives == 2
