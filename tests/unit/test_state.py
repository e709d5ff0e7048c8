from dataclasses import replace

from grid_invaders.levels.wave import initial_state
from tests.test_utils import make_state


def test_description_skips_board_and_empty_vectors() -> None:
    description = initial_state().description
    assert "board" not in description
    assert "incoming_shots" not in description
    assert "outgoing_shots" not in description
    assert len(description["invaders"]) == 15
    assert description["player_lives"] == 3
    assert description["shot_interval"] == 20


def test_description_includes_populated_shots() -> None:
    state = make_state(invaders=[], incoming_shots=[(3, 3)], outgoing_shots=[(7, 1)])
    description = state.description
    assert "invaders" not in description
    assert len(description["incoming_shots"]) == 1
    assert len(description["outgoing_shots"]) == 1


def test_description_tracks_state_changes() -> None:
    state = replace(initial_state(), score=7)
    assert state.description["score"] == 7
