from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_scenario
from .core.seed import SeedManager
from .exceptions import ConfigError, InvalidArgument
from .scenario import ScenarioConfig


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skirmish",
        description="Skirmish - turn-based duel simulator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed the RNG for a reproducible duel")
    parser.add_argument("--scenario", type=Path, default=None, help="YAML file overriding the default scenario")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = ScenarioConfig.load(args.scenario)
        outcome = run_scenario(config, SeedManager(args.seed))
    except (ConfigError, InvalidArgument) as exc:
        print(f"skirmish: {exc}", file=sys.stderr)
        return 2
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
