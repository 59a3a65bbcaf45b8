"""Shared fixtures: small handcrafted mazes and a seeded RNG."""

import random

import pytest

from pacmaze.config import SimulationConfig
from pacmaze.game.session import GameSession
from pacmaze.maze.maze_core import Maze


# 5x5 room, every inner cell open
ROOM_LAYOUT = (
    (1, 1, 1, 1, 1),
    (1, 0, 0, 0, 1),
    (1, 0, 0, 0, 1),
    (1, 0, 0, 0, 1),
    (1, 1, 1, 1, 1),
)

# Loop corridor with a center block
LOOP_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1),
)

# One-cell pocket open only downward
DEAD_END_LAYOUT = (
    (1, 1, 1),
    (1, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
)

# Open arena with a single far pellet so the game does not end at once
ARENA_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 2, 1),
    (1, 1, 1, 1, 1, 1, 1),
)


class FakePlayer:
    """Stand-in exposing only the read-only accessor ghosts use."""

    def __init__(self, cell=(0, 0)):
        self.cell = cell

    def get_grid_position(self):
        return self.cell


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def room_maze():
    return Maze(ROOM_LAYOUT, wrap_rows=None)


@pytest.fixture
def loop_maze():
    return Maze(LOOP_LAYOUT, wrap_rows=None)


@pytest.fixture
def dead_end_maze():
    return Maze(DEAD_END_LAYOUT, wrap_rows=None)


@pytest.fixture
def classic_maze():
    return Maze()


@pytest.fixture
def fake_player():
    return FakePlayer()


def _make_session(layout, player_start, ghost_roster=(), rng=None, **config):
    maze = Maze(layout, wrap_rows=None)
    cfg = SimulationConfig(player_start=player_start, ghost_roster=ghost_roster, **config)
    return GameSession(maze=maze, config=cfg, rng=rng or random.Random(0))


@pytest.fixture
def session_factory():
    """Build a session on a custom layout with an explicit roster."""
    return _make_session


@pytest.fixture
def arena_session():
    """Player at (1,1), Blinky at the far end of the top row."""
    return _make_session(
        ARENA_LAYOUT,
        player_start=(1, 1),
        ghost_roster=(('blinky', (5, 1), (5, 4)),),
    )
