"""
Play field dimensions shared by the entity modules.
"""

# Classic arcade resolution
FIELD_WIDTH = 224
FIELD_HEIGHT = 256

PLAYER_LIVES = 3
