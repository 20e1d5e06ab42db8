from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..exceptions import PreconditionViolation
from .weapon import Weapon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeaponHandle:
    """Non-owning reference to a weapon slot in an Arsenal.

    Combatants hold handles, never weapons: the arsenal keeps ownership and a
    handle only knows where to look the weapon up.
    """

    arsenal: "Arsenal" = field(repr=False)
    index: int

    def is_valid(self) -> bool:
        return self.arsenal.is_valid_index(self.index)

    @property
    def weapon(self) -> Weapon:
        if not self.is_valid():
            raise PreconditionViolation(f"weapon slot {self.index} is no longer in the arsenal")
        return self.arsenal[self.index]


class Arsenal:
    """Ordered collection of weapons available for equipping.

    Insertion order is the equip index. Weapons are stored by value, so
    mutating the Weapon passed to add() does not affect the stored copy.
    """

    def __init__(self) -> None:
        self._weapons: List[Weapon] = []

    def add(self, weapon: Weapon) -> WeaponHandle:
        self._weapons.append(weapon.copy())
        index = len(self._weapons) - 1
        logger.debug("Arsenal slot %d <- %r", index, weapon)
        return WeaponHandle(self, index)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._weapons)

    def handle(self, index: int) -> Optional[WeaponHandle]:
        if not self.is_valid_index(index):
            return None
        return WeaponHandle(self, index)

    def __len__(self) -> int:
        return len(self._weapons)

    def __iter__(self) -> Iterator[Weapon]:
        return iter(self._weapons)

    def __getitem__(self, index: int) -> Weapon:
        return self._weapons[index]
