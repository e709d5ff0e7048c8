from grid_invaders.systems.collision import collision_system
from tests.test_utils import as_cells, make_state


def test_shot_and_invader_destroy_each_other() -> None:
    state = make_state(invaders=[(3, 3), (3, 5)], outgoing_shots=[(3, 3), (6, 6)])
    next_state = collision_system(state)
    assert as_cells(next_state.invaders) == [(3, 5)]
    assert as_cells(next_state.outgoing_shots) == [(6, 6)]
    assert next_state.score == 1


def test_multi_kill_scores_once() -> None:
    state = make_state(
        score=4,
        invaders=[(3, 3), (3, 5), (2, 4)],
        outgoing_shots=[(3, 3), (3, 5), (2, 4)],
    )
    next_state = collision_system(state)
    assert len(next_state.invaders) == 0
    assert len(next_state.outgoing_shots) == 0
    assert next_state.score == 5


def test_duplicate_shots_on_one_invader_are_all_consumed() -> None:
    state = make_state(invaders=[(3, 3)], outgoing_shots=[(3, 3), (3, 3)])
    next_state = collision_system(state)
    assert len(next_state.outgoing_shots) == 0
    assert next_state.score == 1


def test_no_collision_is_noop() -> None:
    state = make_state(invaders=[(3, 3)], outgoing_shots=[(4, 3)])
    assert collision_system(state) is state
