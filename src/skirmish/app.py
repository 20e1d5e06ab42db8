from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .combat import CombatOrchestrator, Combatant, Outcome, Side, Weapon
from .core.seed import RandomSource
from .scenario import ScenarioConfig

logger = logging.getLogger(__name__)


def build_orchestrator(config: ScenarioConfig, rng: Optional[RandomSource] = None) -> CombatOrchestrator:
    """Create an orchestrator populated from a scenario, weapons pre-equipped."""
    player = Combatant(config.player.name, config.player.health, config.player.strength, Side.PLAYER)
    enemy = Combatant(config.enemy.name, config.enemy.health, config.enemy.strength, Side.ENEMY)
    game = CombatOrchestrator(
        player,
        enemy,
        rng,
        heal_range=(config.rules.heal_min, config.rules.heal_max),
        max_rounds=config.rules.max_rounds,
    )
    for w in config.weapons:
        game.add_weapon(Weapon(w.name, w.damage))
    if config.player.weapon is not None:
        game.equip_player_weapon(config.player.weapon)
    if config.enemy.weapon is not None:
        game.equip_enemy_weapon(config.enemy.weapon)
    return game


def run_scenario(
    config: ScenarioConfig,
    rng: Optional[RandomSource] = None,
    out: Optional[TextIO] = None,
) -> Outcome:
    """Play one duel and print every combat event, one per line."""
    if out is None:
        out = sys.stdout
    game = build_orchestrator(config, rng)
    outcome = game.start_game()
    for event in game.log.events():
        print(event.message, file=out)
    logger.debug("Printed %d combat events", len(game.log))
    return outcome
