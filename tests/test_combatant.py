import pytest

from skirmish.combat import Arsenal, Combatant, Side, Weapon
from skirmish.exceptions import InvalidArgument, PreconditionViolation


def armed(name: str, health: int, strength: int, damage: int) -> Combatant:
    arsenal = Arsenal()
    c = Combatant(name, health, strength)
    c.equip_weapon(arsenal.add(Weapon("Club", damage)))
    return c


def test_weapon_damage_is_mutable_but_name_is_not():
    w = Weapon("Sword", 15)
    w.damage = 40
    assert w.damage == 40
    with pytest.raises(AttributeError):
        w.name = "Axe"  # type: ignore[misc]


def test_weapon_rejects_negative_damage():
    with pytest.raises(InvalidArgument):
        Weapon("Stick", -1)
    w = Weapon("Stick", 1)
    with pytest.raises(ValueError):
        w.damage = -5
    assert w.damage == 1


@pytest.mark.parametrize("health,amount,expected", [(100, 30, 70), (100, 100, 0), (20, 500, 0), (5, 0, 5)])
def test_take_damage_clamps_at_zero(health, amount, expected):
    c = Combatant("Hero", health, 1)
    c.take_damage(amount)
    assert c.health == expected
    assert c.is_alive() is (expected > 0)


def test_take_damage_reports_health_lost():
    c = Combatant("Hero", 20, 1)
    assert c.take_damage(50) == 20


def test_heal_has_no_upper_cap():
    c = Combatant("Hero", 300, 2)
    assert c.heal(1000) == 1000
    assert c.health == 1300


def test_heal_is_noop_when_defeated():
    c = Combatant("Hero", 10, 2)
    c.take_damage(10)
    assert c.heal(25) == 0
    assert c.health == 0
    assert not c.is_alive()


def test_negative_amounts_are_rejected():
    c = Combatant("Hero", 10, 2)
    with pytest.raises(InvalidArgument):
        c.heal(-1)
    with pytest.raises(InvalidArgument):
        c.take_damage(-1)
    assert c.health == 10


def test_attack_without_weapon_is_noop():
    attacker = Combatant("Hero", 100, 5)
    target = Combatant("Goblin", 50, 1, Side.ENEMY)
    assert attacker.attack(target) is None
    assert target.health == 50


def test_attack_deals_weapon_damage_times_strength():
    attacker = armed("Hero", 300, 2, 15)
    target = Combatant("Goblin", 150, 4, Side.ENEMY)
    result = attacker.attack(target)
    assert target.health == 120
    assert result is not None
    assert (result.attacker, result.target, result.weapon) == ("Hero", "Goblin", "Club")
    assert result.damage == 30
    assert result.target_health == 120


def test_attack_uses_current_weapon_damage():
    arsenal = Arsenal()
    handle = arsenal.add(Weapon("Sword", 15))
    hero = Combatant("Hero", 300, 2)
    hero.equip_weapon(handle)
    arsenal[0].damage = 50
    goblin = Combatant("Goblin", 150, 4, Side.ENEMY)
    hero.attack(goblin)
    assert goblin.health == 50


def test_equip_none_unequips():
    c = armed("Hero", 10, 1, 5)
    assert c.has_weapon()
    c.equip_weapon(None)
    assert not c.has_weapon()
    with pytest.raises(PreconditionViolation):
        _ = c.weapon


def test_snapshot_is_unequipped_copy():
    c = armed("Hero", 10, 1, 5)
    copy = c.snapshot(Side.ENEMY)
    assert copy.side is Side.ENEMY
    assert not copy.has_weapon()
    copy.take_damage(5)
    assert c.health == 10


def test_negative_starting_health_is_clamped():
    c = Combatant("Ghost", -5, 1)
    assert c.health == 0
    assert not c.is_alive()


def test_attack_on_defeated_target_is_noop():
    hero = armed("Hero", 100, 1, 10)
    goblin = Combatant("Goblin", 0, 1, Side.ENEMY)
    assert hero.attack(goblin) is None
    assert goblin.health == 0


def test_defeated_attacker_cannot_attack():
    ghost = armed("Ghost", 0, 2, 5)
    hero = Combatant("Hero", 100, 1)
    assert ghost.attack(hero) is None
    assert hero.health == 100


@pytest.mark.parametrize("damage", [15.9, "15", True])
def test_weapon_damage_must_be_an_int(damage):
    with pytest.raises(InvalidArgument):
        Weapon("Sword", damage)


@pytest.mark.parametrize("health,strength", [(10.5, 1), ("10", 1), (10, 2.0)])
def test_combatant_stats_must_be_ints(health, strength):
    with pytest.raises(InvalidArgument):
        Combatant("Hero", health, strength)
