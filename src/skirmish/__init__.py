"""
Skirmish package root.

A small turn-based duel simulator: two combatants trade blows with weapons
drawn from a shared arsenal until one of them falls. Combat rules live in
``skirmish.combat`` and stay free of any console presentation concerns.
"""

__version__ = "0.1.0"

__all__ = [
    "combat",
    "__version__",
]
