"""
Collision detection between the player, the ghosts and the collectibles
"""

from pacmaze.entities.ghost import GhostMode
from pacmaze.utils.constants import COLLISION_DISTANCE


class CollisionHandler:
    """
    Detects contacts; the session decides what they cost or earn
    """
    def __init__(self, threshold=COLLISION_DISTANCE):
        """
        Args:
            threshold: Contact distance in cells, below one tile so that
                agents in adjacent cells never touch
        """
        self.threshold = threshold

    def touches(self, player, ghost):
        """Check if a ghost is close enough to the player to collide"""
        return player.distance_to(ghost) < self.threshold

    def classify(self, ghost):
        """
        Outcome of touching a ghost

        Returns:
            'eat_ghost' when the ghost is frightened, 'lose_life' otherwise
        """
        if ghost.mode == GhostMode.FRIGHTENED:
            return 'eat_ghost'
        return 'lose_life'

    def check_collectibles(self, player, maze):
        """
        Collect whatever lies on the player's cell

        Returns:
            Dictionary with collection results:
            {
                'pellet': bool,
                'power_pellet': bool,
            }
        """
        px, py = player.get_grid_position()
        return {
            'pellet': maze.collect_pellet(px, py),
            'power_pellet': maze.collect_power_pellet(px, py),
        }

    def __repr__(self):
        return f"CollisionHandler(threshold={self.threshold})"
