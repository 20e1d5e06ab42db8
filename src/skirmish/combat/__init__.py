"""Duel rules: weapons, combatants, the arsenal and the combat loop."""

from .arsenal import Arsenal, WeaponHandle
from .combatant import AttackResult, Combatant, Side
from .log import CombatEvent, CombatLog
from .orchestrator import CombatOrchestrator, EndReason, GameState, Outcome
from .weapon import Weapon

__all__ = [
    "Arsenal",
    "AttackResult",
    "CombatEvent",
    "CombatLog",
    "CombatOrchestrator",
    "Combatant",
    "EndReason",
    "GameState",
    "Outcome",
    "Side",
    "Weapon",
    "WeaponHandle",
]
