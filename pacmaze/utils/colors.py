"""
Color palette for Pacmaze
"""

# Background colors
COLOR_BG = (0, 0, 0)              # Main background
COLOR_PANEL_BG = (12, 14, 18)     # HUD panel background

# Maze colors
COLOR_WALL = (0, 0, 255)          # Walls and maze border
COLOR_PELLET = (255, 255, 0)      # Pellets and power pellets

# UI colors
COLOR_TEXT = (255, 255, 255)      # Normal text
COLOR_TEXT_DIM = (150, 150, 150)  # Hints
COLOR_GAME_OVER = (255, 0, 0)     # Game over banner
COLOR_VICTORY = (0, 255, 0)       # Clear banner
COLOR_MENU_OVERLAY = (0, 0, 0, 160)

# Entity colors
COLOR_PLAYER = (255, 255, 0)
COLOR_EYE_WHITE = (255, 255, 255)
COLOR_EYE_PUPIL = (0, 0, 0)

# Ghost colors
COLOR_GHOST_BLINKY = (255, 0, 0)
COLOR_GHOST_PINKY = (255, 184, 255)
COLOR_GHOST_INKY = (0, 255, 255)
COLOR_GHOST_CLYDE = (255, 184, 82)
COLOR_GHOST_FRIGHTENED = (0, 0, 255)
COLOR_GHOST_BLINK = (255, 255, 255)

# Ghost-name mapping for easy access
GHOST_COLORS = {
    'blinky': COLOR_GHOST_BLINKY,
    'pinky': COLOR_GHOST_PINKY,
    'inky': COLOR_GHOST_INKY,
    'clyde': COLOR_GHOST_CLYDE,
}
