# Space Invaders Engine Package
"""
Space Invaders Engine - deterministic tick-based arcade shooter simulation.

Modules:
- engine: Geometry, entities, collections and the PlayField orchestrator
- core: Abstract interfaces for games and environments
- game: Game rules, RL environment wrapper and input session
- utils: Configuration loading and logging setup
"""

__version__ = "1.0.0"
