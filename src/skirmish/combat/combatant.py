from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import InvalidArgument, PreconditionViolation
from .arsenal import WeaponHandle
from .weapon import Weapon

logger = logging.getLogger(__name__)


class Side(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass(frozen=True)
class AttackResult:
    """What happened during one attack, for the combat log and the console."""

    attacker: str
    target: str
    weapon: str
    damage: int
    target_health: int


@dataclass
class Combatant:
    """A fighter on either side of a duel.

    Player and enemy behave identically; ``side`` is only a label. The
    equipped weapon is a handle into an arsenal the combatant does not own.
    """

    name: str
    health: int
    strength: int
    side: Side = Side.PLAYER
    equipped: Optional[WeaponHandle] = None

    def __post_init__(self) -> None:
        for attr in ("health", "strength"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"{attr} must be an int, got {value!r}")
        self.health = max(0, self.health)

    def is_alive(self) -> bool:
        return self.health > 0

    def has_weapon(self) -> bool:
        return self.equipped is not None

    @property
    def weapon(self) -> Weapon:
        if self.equipped is None:
            raise PreconditionViolation(f"{self.name} has no weapon equipped")
        return self.equipped.weapon

    def equip_weapon(self, handle: Optional[WeaponHandle]) -> None:
        self.equipped = handle
        logger.debug("%s equipped %r", self.name, handle)

    def heal(self, amount: int) -> int:
        if amount < 0:
            raise InvalidArgument(f"heal amount must be non-negative, got {amount}")
        if not self.is_alive():
            return 0
        self.health += amount
        return amount

    def take_damage(self, amount: int) -> int:
        if amount < 0:
            raise InvalidArgument(f"damage amount must be non-negative, got {amount}")
        before = self.health
        self.health = max(0, self.health - amount)
        return before - self.health

    def attack_damage(self) -> int:
        """Damage this combatant's attack would deal, 0 when unarmed."""
        if self.equipped is None:
            return 0
        return self.weapon.damage * self.strength

    def attack(self, target: "Combatant") -> Optional[AttackResult]:
        if not self.has_weapon():
            return None
        # neither a fallen attacker nor a fallen target takes part in combat
        if not self.is_alive() or not target.is_alive():
            return None
        weapon = self.weapon
        dealt = weapon.damage * self.strength
        target.take_damage(dealt)
        logger.debug(
            "%s attacks %s with %s for %d (health now %d)",
            self.name, target.name, weapon.name, dealt, target.health,
        )
        return AttackResult(
            attacker=self.name,
            target=target.name,
            weapon=weapon.name,
            damage=dealt,
            target_health=target.health,
        )

    def snapshot(self, side: Optional[Side] = None) -> "Combatant":
        """Unequipped value copy, optionally relabelled to another side."""
        return dataclasses.replace(self, side=side or self.side, equipped=None)
