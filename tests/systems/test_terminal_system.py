from grid_invaders.systems.terminal import terminal_system, tick_system
from grid_invaders.utils.terminal import invaders_landed, is_game_over
from tests.test_utils import make_state


def test_game_over_when_lives_exhausted() -> None:
    state = make_state(player_lives=0)
    assert terminal_system(state).is_game_over


def test_game_over_when_rearmost_invader_lands() -> None:
    state = make_state(invaders=[(3, 3), (9, 5)])
    assert invaders_landed(state)
    assert terminal_system(state).is_game_over


def test_landing_check_reads_last_listed_invader() -> None:
    state = make_state(invaders=[(9, 5), (3, 3)])
    assert not invaders_landed(state)


def test_not_game_over() -> None:
    state = make_state(player_lives=1, invaders=[(8, 5)])
    assert not is_game_over(state)
    assert terminal_system(state) is state


def test_latch_survives_recovery() -> None:
    state = make_state(player_lives=2, invaders=[(0, 4)], is_game_over=True)
    assert is_game_over(state)
    assert terminal_system(state) is state


def test_tick_frozen_once_over() -> None:
    assert tick_system(make_state(tick=5), 6).tick == 6
    assert tick_system(make_state(tick=5, player_lives=0), 6).tick == 5
    assert tick_system(make_state(tick=5, is_game_over=True), 6).tick == 5
