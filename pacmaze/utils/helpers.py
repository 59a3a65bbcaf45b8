"""
Helper utility functions for Pacmaze
"""

import math


def grid_round(value):
    """Round half up to the nearest cell index (2.5 -> 3, -0.5 -> 0)"""
    return math.floor(value + 0.5)


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def reverse(direction):
    """Negate a direction vector"""
    dx, dy = direction
    return (-dx, -dy)


def is_aligned(x, y, tolerance):
    """Check if a continuous position sits on a cell center"""
    return (abs(x - grid_round(x)) < tolerance and
            abs(y - grid_round(y)) < tolerance)


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"


def frame_delta(dt_ms, max_dt):
    """Convert a clock tick in milliseconds to seconds, capped at max_dt"""
    return min(dt_ms / 1000.0, max_dt)
