from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CombatEvent:
    """Represents a single combat log entry.

    Attributes:
        turn_index: Round number, 0 for events recorded before the first round.
        actor: Name of the acting combatant.
        action: Action name; the weapon name for attacks, "Heal" for heals.
        target: Name of the target combatant (if any).
        value: Damage dealt or health restored.
        health: The affected combatant's health after the action.
        tags: Semantic tags, e.g. ("damage",), ("heal",), ("start",), ("defeat",).
        message: A pre-rendered human-readable message. If empty, the log synthesizes one.
        timestamp: Monotonic timestamp when the event was recorded.
    """

    turn_index: int
    actor: str
    action: str
    target: Optional[str] = None
    value: Optional[int] = None
    health: Optional[int] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    message: str = ""
    timestamp: float = field(default_factory=time.monotonic)


class CombatLog:
    """In-memory record of one duel.

    - Keeps a finite history (capacity) to avoid unbounded growth.
    - Every event is mirrored to the module logger at DEBUG level.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._events: List[CombatEvent] = []
        logger.debug("CombatLog initialized with capacity=%d", capacity)

    def start_new_battle(self) -> None:
        self._events.clear()
        logger.debug("Combat log reset for a new battle")

    def __len__(self) -> int:
        return len(self._events)

    def _synthesize_message(self, ev: CombatEvent) -> str:
        tags = set(ev.tags)
        if "heal" in tags:
            base = f"{ev.actor} healed by {ev.value or 0} points"
        elif "damage" in tags:
            base = f"{ev.actor} attacks {ev.target} with {ev.action} for {ev.value or 0}"
        else:
            base = f"{ev.actor}: {ev.action}"
        if ev.health is not None:
            who = ev.target if "damage" in tags else ev.actor
            base += f" ({who} health: {ev.health})"
        return base

    def add_event(
        self,
        *,
        turn_index: int,
        actor: str,
        action: str,
        target: Optional[str] = None,
        value: Optional[int] = None,
        health: Optional[int] = None,
        tags: Optional[Sequence[str]] = None,
        message: Optional[str] = None,
        timestamp: Optional[float] = None,
    ) -> CombatEvent:
        """Add a combat event to the log and return the stored instance."""
        ev = CombatEvent(
            turn_index=turn_index,
            actor=actor,
            action=action,
            target=target,
            value=value,
            health=health,
            tags=tuple(tags or ()),
            message=message or "",
            timestamp=time.monotonic() if timestamp is None else timestamp,
        )
        if not ev.message:
            ev = replace(ev, message=self._synthesize_message(ev))
        self._events.append(ev)
        if len(self._events) > self._capacity:
            dropped = len(self._events) - self._capacity
            del self._events[0:dropped]
            logger.debug("CombatLog capacity exceeded, dropped=%d old events", dropped)
        logger.debug("Added CombatEvent: %s", ev.message)
        return ev

    def events(self) -> List[CombatEvent]:
        return list(self._events)

