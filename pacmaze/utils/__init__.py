"""
Constants, colors and small helpers
"""
