from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..core.seed import RandomSource, SeedManager
from ..exceptions import InvalidArgument, PreconditionViolation
from .arsenal import Arsenal, WeaponHandle
from .combatant import AttackResult, Combatant, Side
from .log import CombatLog
from .weapon import Weapon

logger = logging.getLogger(__name__)

DEFAULT_HEAL_RANGE: Tuple[int, int] = (1, 50)
DEFAULT_MAX_ROUNDS = 10_000


class GameState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"


class EndReason(Enum):
    ELIMINATION = "elimination"
    # a side was still unarmed once the fight began
    UNARMED = "unarmed"
    # neither side can deal damage
    STALEMATE = "stalemate"
    ROUND_LIMIT = "round_limit"


@dataclass(frozen=True)
class Outcome:
    reason: EndReason
    winner: Optional[Side] = None
    loser: Optional[Side] = None
    rounds: int = 0

    @property
    def exit_code(self) -> int:
        """Process exit code: 1 when the player side was defeated, else 0."""
        return 1 if self.loser is Side.PLAYER else 0


class CombatOrchestrator:
    """Runs a one-on-one duel between a player and an enemy.

    The orchestrator owns value copies of both combatants and the arsenal
    they equip from. Turn order is fixed: the player attacks first every
    round, then the enemy answers, then the player receives a random heal.
    Whichever attack brings a side to zero health ends the fight, and that
    break reason alone decides the winner.

    Randomness (weapon auto-equip and heals) comes from ``rng``; pass a
    seeded SeedManager or any object with ``randint(a, b)`` for
    reproducible fights.
    """

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant,
        rng: Optional[RandomSource] = None,
        *,
        log: Optional[CombatLog] = None,
        heal_range: Tuple[int, int] = DEFAULT_HEAL_RANGE,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        heal_min, heal_max = heal_range
        if heal_min < 0 or heal_max < heal_min:
            raise InvalidArgument(f"invalid heal range {heal_range!r}")
        if max_rounds <= 0:
            raise InvalidArgument("max_rounds must be positive")
        self._player = player.snapshot(Side.PLAYER)
        self._enemy = enemy.snapshot(Side.ENEMY)
        self._arsenal = Arsenal()
        self._rng: RandomSource = rng if rng is not None else SeedManager()
        self._log = log if log is not None else CombatLog()
        self._heal_range = (heal_min, heal_max)
        self._max_rounds = max_rounds
        self._state = GameState.NOT_STARTED
        self._outcome: Optional[Outcome] = None
        self._round = 0

    @property
    def player(self) -> Combatant:
        return self._player

    @property
    def enemy(self) -> Combatant:
        return self._enemy

    @property
    def arsenal(self) -> Arsenal:
        return self._arsenal

    @property
    def log(self) -> CombatLog:
        return self._log

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    # -- Setup -----------------------------------------------------------

    def add_weapon(self, weapon: Weapon) -> WeaponHandle:
        if self._state is not GameState.NOT_STARTED:
            raise PreconditionViolation("weapons can only be added before the game starts")
        return self._arsenal.add(weapon)

    def equip_by_index(self, combatant: Combatant, index: int) -> None:
        handle = self._arsenal.handle(index)
        if handle is None:
            logger.debug("Ignoring equip of %s with out-of-range index %d", combatant.name, index)
            return
        combatant.equip_weapon(handle)

    def equip_player_weapon(self, index: int) -> None:
        self.equip_by_index(self._player, index)

    def equip_enemy_weapon(self, index: int) -> None:
        self.equip_by_index(self._enemy, index)

    def equip_random(self, combatant: Combatant) -> Optional[Weapon]:
        if len(self._arsenal) == 0:
            logger.debug("Arsenal empty; %s stays unarmed", combatant.name)
            return None
        index = self._rng.randint(0, len(self._arsenal) - 1)
        self.equip_by_index(combatant, index)
        return combatant.weapon

    def randomly_heal_player(self) -> int:
        amount = self._rng.randint(*self._heal_range)
        healed = self._player.heal(amount)
        if self._player.is_alive():
            self._log.add_event(
                turn_index=self._round,
                actor=self._player.name,
                action="Heal",
                value=healed,
                health=self._player.health,
                tags=["heal"],
            )
        return healed

    # -- Combat loop -----------------------------------------------------

    def start_game(self) -> Outcome:
        if self._state is not GameState.NOT_STARTED:
            raise PreconditionViolation("a game can only be started once")
        self._state = GameState.IN_PROGRESS
        self._log.start_new_battle()
        self._log.add_event(
            turn_index=0,
            actor=self._player.name,
            action="Start",
            target=self._enemy.name,
            tags=["start"],
            message=f"Game started: {self._player.name} vs {self._enemy.name}",
        )
        logger.info("Game started: %s vs %s", self._player.name, self._enemy.name)

        for combatant in (self._player, self._enemy):
            if not combatant.has_weapon():
                self.equip_random(combatant)

        outcome = self._fight()
        self._conclude(outcome)
        return outcome

    def _fight(self) -> Outcome:
        # a side that enters already at zero health loses without a blow
        if not self._player.is_alive():
            return Outcome(EndReason.ELIMINATION, Side.ENEMY, Side.PLAYER)
        if not self._enemy.is_alive():
            return Outcome(EndReason.ELIMINATION, Side.PLAYER, Side.ENEMY)

        both_armed = self._player.has_weapon() and self._enemy.has_weapon()
        if both_armed and self._player.attack_damage() == 0 and self._enemy.attack_damage() == 0:
            logger.warning("Neither side can deal damage; declaring a stalemate")
            return Outcome(EndReason.STALEMATE)

        while self._round < self._max_rounds:
            if not (self._player.has_weapon() and self._enemy.has_weapon()):
                self._log.add_event(
                    turn_index=self._round,
                    actor=self._player.name,
                    action="Abort",
                    tags=["unarmed"],
                    message="Weapon not equipped. Cannot fight.",
                )
                logger.warning("Weapon not equipped; fight aborted")
                return Outcome(EndReason.UNARMED, rounds=self._round)

            self._round += 1
            if self._exchange(self._player, self._enemy):
                return Outcome(EndReason.ELIMINATION, Side.PLAYER, Side.ENEMY, self._round)
            if self._exchange(self._enemy, self._player):
                return Outcome(EndReason.ELIMINATION, Side.ENEMY, Side.PLAYER, self._round)
            self.randomly_heal_player()

        logger.warning("Round limit %d reached without a winner", self._max_rounds)
        return Outcome(EndReason.ROUND_LIMIT, rounds=self._round)

    def _exchange(self, attacker: Combatant, target: Combatant) -> bool:
        """One attack; returns True when it eliminates the target."""
        result = attacker.attack(target)
        if result is not None:
            self._record_attack(result)
        return not target.is_alive()

    def _record_attack(self, result: AttackResult) -> None:
        self._log.add_event(
            turn_index=self._round,
            actor=result.attacker,
            action=result.weapon,
            target=result.target,
            value=result.damage,
            health=result.target_health,
            tags=["damage"],
        )

    def _conclude(self, outcome: Outcome) -> None:
        self._state = GameState.CONCLUDED
        self._outcome = outcome
        if outcome.loser is not None:
            loser = self._player if outcome.loser is Side.PLAYER else self._enemy
            self._log.add_event(
                turn_index=self._round,
                actor=loser.name,
                action="Defeated",
                tags=["defeat"],
                message=f"{loser.name} has been defeated.",
            )
        logger.info(
            "Game over after %d rounds: reason=%s winner=%s",
            outcome.rounds,
            outcome.reason.value,
            outcome.winner.value if outcome.winner else None,
        )
