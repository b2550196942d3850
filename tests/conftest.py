import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from wheeloffortune import GameSession  # noqa: E402
from wof_testing import TEST_PUZZLES, TEST_WHEEL, ScriptedRandom  # noqa: E402


@pytest.fixture()
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture()
def session(rng: ScriptedRandom) -> GameSession:
    """Two players, rounds in TEST_PUZZLES order, vowels cost 250."""
    return GameSession(["A", "B"], TEST_PUZZLES, wheel=TEST_WHEEL, vowel_price=250, rng=rng)
