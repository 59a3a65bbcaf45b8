"""
Game State Machine - manages session states and transitions
"""

from enum import Enum, auto

from loguru import logger


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    VICTORY = auto()


TERMINAL_STATES = (GameState.GAME_OVER, GameState.VICTORY)


class GameStateManager:
    """
    Manages game state transitions

    PLAYING and PAUSED toggle freely; GAME_OVER and VICTORY can only be left
    through reset().
    """
    def __init__(self):
        self.current_state = GameState.PLAYING
        self.previous_state = None

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
        """
        if new_state == self.current_state:
            return
        logger.debug(f"Game state {self.current_state.name} -> {new_state.name}")
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_terminal(self):
        """Check if the session has ended"""
        return self.current_state in TERMINAL_STATES

    def can_pause(self):
        """Check if game can be paused"""
        return self.current_state == GameState.PLAYING

    def can_resume(self):
        """Check if game can be resumed"""
        return self.current_state == GameState.PAUSED

    def toggle_pause(self):
        """
        Flip between PLAYING and PAUSED

        Returns:
            True if the state changed
        """
        if self.can_pause():
            self.transition_to(GameState.PAUSED)
            return True
        if self.can_resume():
            self.transition_to(GameState.PLAYING)
            return True
        return False

    def reset(self):
        """Back to PLAYING for a fresh session"""
        self.previous_state = None
        self.current_state = GameState.PLAYING

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.get_state_name()})"
