"""
Game session - owns the maze, the player and the ghosts and advances them
one tick at a time
"""

import random
from dataclasses import dataclass

from loguru import logger

from pacmaze.config import DEFAULT_CONFIG
from pacmaze.entities.ghost import Ghost, GhostManager
from pacmaze.entities.player import Player
from pacmaze.game.collision import CollisionHandler
from pacmaze.game.errors import SimulationError
from pacmaze.game.game_state import GameState, GameStateManager
from pacmaze.maze.maze_core import Maze


@dataclass(frozen=True)
class GhostView:
    """Read-only ghost state for renderers"""
    name: str
    x: float
    y: float
    mode: str
    color: tuple
    mode_timer: float
    blinking: bool


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only session state for renderers and tests"""
    state: GameState
    score: int
    lives: int
    remaining: int
    player_x: float
    player_y: float
    player_direction: tuple
    ghosts: tuple


class GameSession:
    """
    One game of pellet chasing

    Input adapters call set_direction() and toggle_pause(), the frame loop
    calls update(dt) and renderers read the public attributes or snapshot().
    """
    def __init__(self, maze=None, config=DEFAULT_CONFIG, rng=None):
        """
        Args:
            maze: Maze object (classic layout when None)
            config: SimulationConfig
            rng: random.Random for frightened ghosts; seed it for replays
        """
        self.config = config
        self.maze = maze or Maze()
        self.rng = rng or random.Random()

        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler(config.collision_distance)

        self.score = 0
        self.lives = config.starting_lives

        start_x, start_y = config.player_start
        self.player = Player(start_x, start_y, self.maze, speed=config.player_speed)

        self.ghost_manager = GhostManager()
        for name, (gx, gy), corner in config.ghost_roster:
            self.ghost_manager.add_ghost(Ghost(
                gx, gy, self.maze, self.player, name,
                scatter_target=corner,
                speed=config.ghost_speed,
                rng=self.rng,
                frightened_duration=config.frightened_duration,
                frightened_speed_factor=config.frightened_speed_factor,
                behavior_duration=config.behavior_duration,
            ))

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def ghosts(self):
        return self.ghost_manager.ghosts

    @property
    def is_over(self):
        """True once the game reached GAME_OVER or VICTORY"""
        return self.state_manager.is_terminal()

    # ========== INPUT ==========

    def set_direction(self, dx, dy):
        """
        Forward a direction request to the player

        Returns:
            True if the request was accepted (only while playing)
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            return False
        self.player.set_direction(dx, dy)
        return True

    def toggle_pause(self):
        """Pause or resume; ignored once the game has ended"""
        changed = self.state_manager.toggle_pause()
        if changed:
            logger.info(f"Game {'paused' if self.state == GameState.PAUSED else 'resumed'}")
        return changed

    def restart(self):
        """Start over with a full maze, zero score and fresh lives"""
        self.maze.reset()
        self.score = 0
        self.lives = self.config.starting_lives
        self.player.reset()
        self.ghost_manager.reset()
        self.state_manager.reset()
        logger.info("Game restarted")

    # ========== TICK ==========

    def update(self, dt):
        """
        Advance the simulation by one tick

        Args:
            dt: Delta time in seconds (non-negative)

        Returns:
            True if a tick was simulated (the game is playing)
        """
        if dt < 0:
            raise ValueError(f"delta time must be non-negative, got {dt}")
        if not self.state_manager.is_state(GameState.PLAYING):
            return False

        self.player.update(dt)
        self.ghost_manager.update(dt)

        self.check_collisions()
        self.check_collectibles()
        self.check_game_end()

        self.check_invariants()
        return True

    def check_collisions(self):
        """Resolve player contact with each ghost in roster order"""
        for ghost in self.ghosts:
            if self.lives <= 0:
                break
            if not self.collision_handler.touches(self.player, ghost):
                continue

            if self.collision_handler.classify(ghost) == 'eat_ghost':
                logger.debug(f"Ate {ghost.name}")
                ghost.reset()
                self.add_score(self.config.score_ghost)
            else:
                logger.debug(f"Caught by {ghost.name}")
                self.lose_life()

    def check_collectibles(self):
        """Eat the pellet or power pellet under the player"""
        result = self.collision_handler.check_collectibles(self.player, self.maze)

        if result['pellet']:
            self.add_score(self.config.score_pellet)

        if result['power_pellet']:
            self.add_score(self.config.score_power_pellet)
            count = self.ghost_manager.frighten_all()
            logger.debug(f"Power pellet, {count} ghosts frightened")

        return result

    def check_game_end(self):
        """Move to VICTORY or GAME_OVER when a terminal condition holds"""
        if self.maze.all_collected():
            self.state_manager.transition_to(GameState.VICTORY)
            logger.info(f"Victory with score {self.score}")

        if self.lives <= 0:
            self.state_manager.transition_to(GameState.GAME_OVER)
            logger.info(f"Game over with score {self.score}")

    def lose_life(self):
        """Take a life; with lives left, restart the round from the start cells"""
        self.lives = max(0, self.lives - 1)
        logger.info(f"Life lost, {self.lives} remaining")

        if self.lives > 0:
            self.player.reset()
            self.ghost_manager.reset()

    def add_score(self, points):
        if points < 0:
            raise ValueError(f"score points must be non-negative, got {points}")
        self.score += points

    # ========== INVARIANTS ==========

    def check_invariants(self):
        """
        Raise SimulationError if the session reached an impossible state

        Agents outside the grid mean the wrap or wall logic is broken.
        """
        if self.lives < 0:
            raise SimulationError(f"lives went negative: {self.lives}")
        if self.score < 0:
            raise SimulationError(f"score went negative: {self.score}")
        if self.maze.remaining < 0:
            raise SimulationError(f"remaining collectibles went negative: {self.maze.remaining}")

        for agent in (self.player, *self.ghosts):
            if not self.maze.in_bounds(*agent.get_grid_position()):
                raise SimulationError(f"{agent!r} left the maze")

    # ========== READ-ONLY VIEW ==========

    def snapshot(self):
        """Capture the state a renderer needs"""
        ghosts = tuple(
            GhostView(
                name=ghost.name,
                x=ghost.x,
                y=ghost.y,
                mode=ghost.mode.value,
                color=ghost.display_color(),
                mode_timer=ghost.mode_timer,
                blinking=ghost.is_blinking(),
            )
            for ghost in self.ghosts
        )
        return SessionSnapshot(
            state=self.state,
            score=self.score,
            lives=self.lives,
            remaining=self.maze.remaining,
            player_x=self.player.x,
            player_y=self.player.y,
            player_direction=self.player.direction,
            ghosts=ghosts,
        )

    def __repr__(self):
        return (f"GameSession(state={self.state_manager.get_state_name()}, score={self.score}, "
                f"lives={self.lives}, remaining={self.maze.remaining})")
