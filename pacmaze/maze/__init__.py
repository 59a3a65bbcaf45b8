"""
Maze Module - tile grid, collectibles and the classic layout
"""

from .maze_core import Maze, CellKind
from .layout import CLASSIC_LAYOUT

__all__ = ['Maze', 'CellKind', 'CLASSIC_LAYOUT']
