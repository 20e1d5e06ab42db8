import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRandom:
    """RandomSource that replays fixed values and records the ranges asked for."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom
