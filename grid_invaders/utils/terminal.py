"""Terminal condition helper predicates."""

from grid_invaders.state import State


def invaders_landed(state: State) -> bool:
    """Return True if the rearmost listed invader reached the player row."""
    return len(state.invaders) > 0 and state.invaders[-1].row >= state.player_row


def is_game_over(state: State) -> bool:
    """Return True if the latch is set, lives ran out, or invaders landed."""
    return state.is_game_over or state.player_lives <= 0 or invaders_landed(state)
