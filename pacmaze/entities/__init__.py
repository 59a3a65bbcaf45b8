"""
Entities Module - player and ghosts over the shared motion model
"""

from .agent import Agent
from .player import Player
from .ghost import Ghost, GhostMode, GhostManager

__all__ = ['Agent', 'Player', 'Ghost', 'GhostMode', 'GhostManager']
