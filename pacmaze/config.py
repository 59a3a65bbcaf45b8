"""
Game configuration for Pacmaze
Tunable simulation parameters with classic defaults
"""

from pacmaze.utils.constants import (
    PLAYER_SPEED, PLAYER_START, GHOST_SPEED, FRIGHTENED_DURATION,
    FRIGHTENED_SPEED_FACTOR, BEHAVIOR_DURATION, STARTING_LIVES,
    COLLISION_DISTANCE, SCORE_PELLET, SCORE_POWER_PELLET, SCORE_GHOST,
    GHOST_ROSTER
)

GAME_TITLE = "Pacmaze"
GAME_VERSION = "1.0.0"


class SimulationConfig:
    """Configuration for a single game session"""
    def __init__(self, **kwargs):
        # Player
        self.player_speed = kwargs.get('player_speed', PLAYER_SPEED)
        self.player_start = kwargs.get('player_start', PLAYER_START)

        # Ghosts
        self.ghost_speed = kwargs.get('ghost_speed', GHOST_SPEED)
        self.ghost_roster = kwargs.get('ghost_roster', GHOST_ROSTER)
        self.frightened_duration = kwargs.get('frightened_duration', FRIGHTENED_DURATION)
        self.frightened_speed_factor = kwargs.get('frightened_speed_factor', FRIGHTENED_SPEED_FACTOR)
        self.behavior_duration = kwargs.get('behavior_duration', BEHAVIOR_DURATION)

        # Session rules
        self.starting_lives = kwargs.get('starting_lives', STARTING_LIVES)
        self.collision_distance = kwargs.get('collision_distance', COLLISION_DISTANCE)

        # Scoring
        self.score_pellet = kwargs.get('score_pellet', SCORE_PELLET)
        self.score_power_pellet = kwargs.get('score_power_pellet', SCORE_POWER_PELLET)
        self.score_ghost = kwargs.get('score_ghost', SCORE_GHOST)

    def __repr__(self):
        return (f"SimulationConfig(player_speed={self.player_speed}, "
                f"ghost_speed={self.ghost_speed}, lives={self.starting_lives})")


DEFAULT_CONFIG = SimulationConfig()
