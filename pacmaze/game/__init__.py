"""
Session orchestration, state machine, collisions and the pygame adapters
"""
