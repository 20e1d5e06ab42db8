from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import List, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def _require_int(section: str, key: str, value: object) -> None:
    # YAML booleans load as bool, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{section}.{key} must be an integer, got {value!r}")


@dataclass(frozen=True)
class FighterConfig:
    name: str
    health: int
    strength: int
    # arsenal index to pre-equip; None leaves the fighter to be auto-equipped
    weapon: Optional[int] = None


@dataclass(frozen=True)
class WeaponConfig:
    name: str
    damage: int


@dataclass(frozen=True)
class RulesConfig:
    heal_min: int = 1
    heal_max: int = 50
    max_rounds: int = 10_000


@dataclass(frozen=True)
class ScenarioConfig:
    player: FighterConfig
    enemy: FighterConfig
    weapons: List[WeaponConfig] = field(default_factory=list)
    rules: RulesConfig = field(default_factory=RulesConfig)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read scenario {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"scenario {path} must be a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: dict) -> "ScenarioConfig":
        try:
            player = FighterConfig(**data["player"])
            enemy = FighterConfig(**data["enemy"])
            weapons = [WeaponConfig(**w) for w in data.get("weapons") or []]
            rules = RulesConfig(**(data.get("rules") or {}))
        except (KeyError, TypeError) as exc:
            raise ConfigError(f"malformed scenario: {exc}") from exc

        for section, entry in (("player", player), ("enemy", enemy)):
            _require_int(section, "health", entry.health)
            _require_int(section, "strength", entry.strength)
            if entry.weapon is not None:
                _require_int(section, "weapon", entry.weapon)
        for w in weapons:
            _require_int(f"weapons[{w.name}]", "damage", w.damage)
        for key in ("heal_min", "heal_max", "max_rounds"):
            _require_int("rules", key, getattr(rules, key))
        return cls(player=player, enemy=enemy, weapons=weapons, rules=rules)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "ScenarioConfig":
        """Load the packaged default scenario, overlaid with an optional user file.

        Nested mappings (fighters, rules) are merged key by key; a ``weapons``
        list in the user file replaces the default list entirely.
        """
        with resources.files("skirmish").joinpath("default_scenario.yaml").open("r", encoding="utf-8") as f:
            default_data = yaml.safe_load(f) or {}

        user_data = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"scenario file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.debug("Loaded scenario overrides from %s", user_path)

        config = cls.from_dict(cls._deep_merge(default_data, user_data))
        logger.info(
            "Scenario: %s vs %s with %d weapons",
            config.player.name, config.enemy.name, len(config.weapons),
        )
        return config
