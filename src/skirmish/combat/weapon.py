from __future__ import annotations

from ..exceptions import InvalidArgument


class Weapon:
    """A named weapon. The name is fixed at construction; damage can be retuned."""

    __slots__ = ("_name", "_damage")

    def __init__(self, name: str, damage: int) -> None:
        self._name = str(name)
        self._damage = 0
        self.damage = damage

    @property
    def name(self) -> str:
        return self._name

    @property
    def damage(self) -> int:
        return self._damage

    @damage.setter
    def damage(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"weapon damage must be an int, got {value!r}")
        if value < 0:
            raise InvalidArgument(f"weapon damage must be non-negative, got {value}")
        self._damage = value

    def copy(self) -> "Weapon":
        return Weapon(self._name, self._damage)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weapon):
            return NotImplemented
        return self._name == other._name and self._damage == other._damage

    def __repr__(self) -> str:
        return f"Weapon(name={self._name!r}, damage={self._damage})"
