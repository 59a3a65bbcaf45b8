"""
Pacmaze - pellet-chasing maze arcade game
"""
