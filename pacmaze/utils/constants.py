"""
Global constants for Pacmaze
"""

# Screen settings
TILE_SIZE = 20
FPS = 60
MAX_FRAME_DT = 0.05  # seconds; longer frames are clamped so agents cannot skip cells

# HUD panel height
PANEL_H = 40

# Maze cell codes (layout values)
CELL_EMPTY = 0
CELL_WALL = 1
CELL_PELLET = 2
CELL_POWER_PELLET = 3

# Classic maze
WRAP_ROWS = (10, 12)  # inclusive row range of the side tunnel

# Direction vectors
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
STOP = (0, 0)

# Enumeration order matters for ghost tie-breaks
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Agent motion
ALIGN_TOLERANCE = 0.1

# Player settings
PLAYER_SPEED = 5.0           # cells per second
PLAYER_START = (13, 21)      # bottom corridor, below the center wall
PLAYER_ANIMATION_SPEED = 10  # mouth phase per second

# Ghost settings
GHOST_SPEED = 3.0            # cells per second
FRIGHTENED_SPEED_FACTOR = 0.5
FRIGHTENED_DURATION = 8.0    # seconds
BEHAVIOR_DURATION = 20.0     # chase/scatter flip interval (seconds)
BLINK_THRESHOLD = 2.0        # frightened seconds left before blinking
DEFAULT_SCATTER_TARGET = (13, 15)

# Ghost roster: name -> (start cell, scatter corner)
GHOST_ROSTER = (
    ('blinky', (13, 11), (25, 0)),
    ('pinky', (13, 13), (2, 0)),
    ('inky', (12, 13), (25, 22)),
    ('clyde', (14, 13), (2, 22)),
)

# Session
STARTING_LIVES = 3
COLLISION_DISTANCE = 0.8     # below one tile to ignore adjacent cells

# Score constants
SCORE_PELLET = 10
SCORE_POWER_PELLET = 50
SCORE_GHOST = 200
