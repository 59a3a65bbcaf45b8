"""Scenario tests for GameSession: scoring, lives, terminal states and pause."""

import random

import pytest

from pacmaze.entities.ghost import GhostMode
from pacmaze.game.errors import SimulationError
from pacmaze.game.game_state import GameState
from pacmaze.game.session import GameSession, SessionSnapshot
from pacmaze.utils.constants import LEFT, RIGHT, UP

TWO_PELLETS = (
    (1, 1, 1, 1, 1, 1, 1),
    (1, 2, 0, 0, 0, 2, 1),
    (1, 1, 1, 1, 1, 1, 1),
)

ONE_PELLET = (
    (1, 1, 1, 1, 1),
    (1, 2, 0, 0, 1),
    (1, 1, 1, 1, 1),
)

POWER_ROOM = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 3, 0, 0, 0, 0, 0, 2, 1),
    (1, 0, 1, 1, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1),
)


def _place_ghost_beside_player(session, offset=0.5):
    ghost = session.ghosts[0]
    ghost.x = session.player.x + offset
    ghost.y = session.player.y
    return ghost


class TestDefaultSession:
    def test_classic_setup(self):
        session = GameSession(rng=random.Random(3))
        assert session.state == GameState.PLAYING
        assert session.score == 0
        assert session.lives == 3
        assert (session.player.x, session.player.y) == (13.0, 21.0)
        assert [g.name for g in session.ghosts] == ['blinky', 'pinky', 'inky', 'clyde']
        assert [g.scatter_target for g in session.ghosts] == [(25, 0), (2, 0), (25, 22), (2, 22)]

    def test_agents_share_session_maze(self):
        session = GameSession()
        assert session.player.maze is session.maze
        assert all(g.maze is session.maze for g in session.ghosts)
        assert all(g.player is session.player for g in session.ghosts)


class TestCollectibles:
    def test_single_pellet_under_player(self, session_factory):
        session = session_factory(TWO_PELLETS, player_start=(1, 1))
        assert session.maze.remaining == 2

        assert session.update(0.016) is True

        assert session.score == 10
        assert session.maze.remaining == 1
        assert session.state == GameState.PLAYING

        session.update(0.016)
        assert session.score == 10
        assert session.maze.remaining == 1

    def test_last_pellet_is_victory(self, session_factory):
        session = session_factory(ONE_PELLET, player_start=(1, 1))
        session.update(0.016)
        assert session.state == GameState.VICTORY
        assert session.maze.all_collected()

        session.set_direction(*RIGHT)
        assert session.update(0.5) is False
        assert session.player.x == 1.0

    def test_power_pellet_frightens_all_but_eaten(self, session_factory):
        roster = tuple((f"g{i}", (2 + i, 3), (7, 3)) for i in range(5))
        session = session_factory(POWER_ROOM, player_start=(1, 1), ghost_roster=roster)
        session.ghosts[4].mode = GhostMode.EATEN

        session.update(0.01)

        assert session.score == 50
        for ghost in session.ghosts[:4]:
            assert ghost.mode == GhostMode.FRIGHTENED
            assert ghost.mode_timer == 8.0
        assert session.ghosts[4].mode == GhostMode.EATEN

    def test_remaining_never_increases(self, session_factory):
        session = session_factory(TWO_PELLETS, player_start=(1, 1))
        session.set_direction(*RIGHT)
        history = [session.maze.remaining]
        for _ in range(120):
            session.update(1 / 60)
            history.append(session.maze.remaining)
        assert all(a >= b for a, b in zip(history, history[1:]))
        assert history[-1] == 0
        assert session.state == GameState.VICTORY
        assert session.score == 20


class TestGhostCollisions:
    def test_chase_ghost_costs_a_life_and_resets_round(self, arena_session):
        session = arena_session
        _place_ghost_beside_player(session)

        session.update(0.01)

        assert session.lives == 2
        assert session.score == 0
        assert session.state == GameState.PLAYING
        ghost = session.ghosts[0]
        assert (ghost.x, ghost.y) == (5.0, 1.0)
        assert ghost.direction == UP
        assert (session.player.x, session.player.y) == (1.0, 1.0)

    def test_eating_frightened_ghost(self, arena_session):
        session = arena_session
        ghost = _place_ghost_beside_player(session)
        ghost.frighten()

        session.update(0.01)

        assert session.lives == 3
        assert session.score == 200
        assert ghost.mode == GhostMode.CHASE
        assert (ghost.x, ghost.y) == (5.0, 1.0)

    def test_adjacent_cell_is_not_contact(self, arena_session):
        session = arena_session
        _place_ghost_beside_player(session, offset=0.85)
        session.ghost_manager.ghosts[0].direction = RIGHT
        session.update(0.0)
        assert session.lives == 3

    def test_last_life_is_game_over(self, arena_session):
        session = arena_session
        session.lives = 1
        _place_ghost_beside_player(session)

        session.update(0.01)

        assert session.lives == 0
        assert session.state == GameState.GAME_OVER
        # No round restart on the final life
        assert session.ghosts[0].x == pytest.approx(1.5)

        before = session.snapshot()
        session.set_direction(*RIGHT)
        for _ in range(10):
            assert session.update(0.05) is False
        assert session.snapshot() == before

    def test_lives_never_negative(self, session_factory):
        roster = (('a', (3, 1), (5, 4)), ('b', (3, 2), (5, 4)))
        session = session_factory(
            (
                (1, 1, 1, 1, 1, 1, 1),
                (1, 0, 0, 0, 0, 0, 1),
                (1, 0, 0, 0, 0, 0, 1),
                (1, 0, 0, 0, 0, 2, 1),
                (1, 1, 1, 1, 1, 1, 1),
            ),
            player_start=(1, 1),
            ghost_roster=roster,
        )
        session.lives = 1
        for ghost in session.ghosts:
            ghost.x, ghost.y = 1.3, 1.0

        session.update(0.0)

        assert session.lives == 0
        assert session.state == GameState.GAME_OVER


class TestPause:
    def test_pause_freezes_everything(self, arena_session):
        session = arena_session
        assert not session.is_over
        session.set_direction(*RIGHT)
        session.update(0.1)

        assert session.toggle_pause() is True
        assert session.state == GameState.PAUSED
        before = session.snapshot()
        timer = session.ghosts[0].behavior_timer

        assert session.update(0.5) is False
        assert session.snapshot() == before
        assert session.ghosts[0].behavior_timer == timer

        assert session.toggle_pause() is True
        assert session.state == GameState.PLAYING

    def test_direction_ignored_while_paused(self, arena_session):
        session = arena_session
        session.toggle_pause()
        assert session.set_direction(*LEFT) is False
        assert session.player.next_direction == (0, 0)

    def test_pause_ignored_after_game_end(self, session_factory):
        session = session_factory(ONE_PELLET, player_start=(1, 1))
        session.update(0.016)
        assert session.is_over
        assert session.toggle_pause() is False
        assert session.state == GameState.VICTORY


class TestRestart:
    def test_restart_after_game_over(self, arena_session):
        session = arena_session
        session.lives = 1
        session.score = 120
        _place_ghost_beside_player(session)
        session.update(0.01)
        assert session.state == GameState.GAME_OVER
        assert session.is_over

        session.restart()

        assert session.state == GameState.PLAYING
        assert not session.is_over
        assert "state=PLAYING" in repr(session)
        assert session.score == 0
        assert session.lives == 3
        assert session.maze.remaining == 1
        assert (session.player.x, session.player.y) == (1.0, 1.0)
        assert session.ghosts[0].mode == GhostMode.CHASE


class TestErrors:
    def test_negative_delta_rejected(self, arena_session):
        with pytest.raises(ValueError):
            arena_session.update(-0.1)

    def test_negative_points_rejected(self, arena_session):
        with pytest.raises(ValueError):
            arena_session.add_score(-5)

    def test_invariant_score(self, arena_session):
        arena_session.score = -1
        with pytest.raises(SimulationError):
            arena_session.check_invariants()

    def test_invariant_agent_outside_maze(self, arena_session):
        arena_session.player.y = 40.0
        with pytest.raises(SimulationError, match="left the maze"):
            arena_session.check_invariants()


class TestDeterminism:
    def _run(self, seed):
        session = GameSession(rng=random.Random(seed))
        moves = {0: LEFT, 40: UP, 90: RIGHT, 150: UP, 220: LEFT}
        for tick in range(300):
            if tick in moves:
                session.set_direction(*moves[tick])
            if tick == 60:
                for ghost in session.ghosts:
                    ghost.frighten()
            session.update(1 / 60)
        return session

    def test_same_seed_same_game(self):
        assert self._run(11).snapshot() == self._run(11).snapshot()

    def test_long_run_keeps_invariants(self):
        session = self._run(5)
        snapshot = session.snapshot()
        assert isinstance(snapshot, SessionSnapshot)
        assert snapshot.lives >= 0
        assert snapshot.score >= 0
        assert snapshot.remaining == session.maze.count_collectibles()
        assert len(snapshot.ghosts) == 4
        for view in snapshot.ghosts:
            assert 0 <= view.x < session.maze.width
