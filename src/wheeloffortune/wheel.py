from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union

from .errors import ConfigurationError, InvalidPayloadError
from .utils.random_provider import RandomSource

logger = logging.getLogger(__name__)

LOSE_TURN_TOKEN = "LOSE_TURN"
BANKRUPT_TOKEN = "BANKRUPT"
PRIZE_TOKEN = "PRIZE"


@dataclass(frozen=True)
class Cash:
    """Stake paid per revealed letter on the next consonant guess."""

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int) or self.amount < 0:
            raise ConfigurationError(f"Cash field amount must be a non-negative integer, got {self.amount!r}")

    def to_token(self) -> Union[int, str]:
        return self.amount


@dataclass(frozen=True)
class LoseTurn:
    """Ends the turn with no other effect."""

    def to_token(self) -> Union[int, str]:
        return LOSE_TURN_TOKEN


@dataclass(frozen=True)
class Bankrupt:
    """Zeroes the spinning player's points and ends the turn."""

    def to_token(self) -> Union[int, str]:
        return BANKRUPT_TOKEN


@dataclass(frozen=True)
class Prize:
    """Bonus prize, won by revealing at least one consonant on this spin."""

    name: str = PRIZE_TOKEN

    def to_token(self) -> Union[int, str]:
        if self.name == PRIZE_TOKEN:
            return PRIZE_TOKEN
        return f"{PRIZE_TOKEN}:{self.name}"


WheelField = Union[Cash, LoseTurn, Bankrupt, Prize]


def parse_wheel_field(token: Any) -> WheelField:
    """Build a WheelField from a configuration token.

    Integers become Cash; the strings LOSE_TURN, BANKRUPT, PRIZE and
    PRIZE:<name> map to the special fields. Numeric strings are accepted too.
    """
    if isinstance(token, (Cash, LoseTurn, Bankrupt, Prize)):
        return token
    if isinstance(token, bool):
        raise ConfigurationError(f"Invalid wheel field: {token!r}")
    if isinstance(token, int):
        return Cash(token)
    if isinstance(token, str):
        s = token.strip()
        upper = s.upper()
        if s.isdigit():
            return Cash(int(s))
        if upper == LOSE_TURN_TOKEN:
            return LoseTurn()
        if upper == BANKRUPT_TOKEN:
            return Bankrupt()
        if upper == PRIZE_TOKEN:
            return Prize()
        if upper.startswith(PRIZE_TOKEN + ":"):
            name = s[len(PRIZE_TOKEN) + 1:].strip()
            if not name:
                raise ConfigurationError(f"Prize field has an empty name: {token!r}")
            return Prize(name)
    raise ConfigurationError(f"Invalid wheel field: {token!r}")


@dataclass(frozen=True)
class Wheel:
    """Ordered, static table of reward fields."""

    fields: Tuple[WheelField, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise ConfigurationError("Wheel must contain at least one field")

    @classmethod
    def from_tokens(cls, tokens: Iterable[Any]) -> "Wheel":
        return cls(tuple(parse_wheel_field(t) for t in tokens))

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, index: int) -> WheelField:
        return self.fields[index]

    def spin(self, rng: RandomSource, success_probability: float = 1.0) -> Optional[int]:
        """Spin the wheel.

        A Bernoulli trial with ``success_probability`` decides whether the spin
        lands at all. On success the index of a uniformly chosen field is
        returned, otherwise None.

        Raises:
            InvalidPayloadError: if the probability is not a number in [0, 1].
        """
        if isinstance(success_probability, bool) or not isinstance(success_probability, (int, float)):
            raise InvalidPayloadError(f"Success probability must be a number, got {success_probability!r}")
        if not 0.0 <= success_probability <= 1.0:
            raise InvalidPayloadError(f"Success probability must be within [0, 1], got {success_probability}")

        if rng.random() >= success_probability:
            logger.debug("Spin failed (p=%.3f)", success_probability)
            return None

        index = rng.randrange(len(self.fields))
        logger.debug("Spin landed on field %d: %s", index, self.fields[index])
        return index

    def to_tokens(self) -> list:
        return [f.to_token() for f in self.fields]


DEFAULT_WHEEL_TOKENS = (
    0, 25, 50, 75, 100, 150, 200, 250, 300, 350, 400, 450, 500,
    1000, 1500, 2000, 5000,
    LOSE_TURN_TOKEN, BANKRUPT_TOKEN, PRIZE_TOKEN,
)


__all__ = [
    "Cash",
    "LoseTurn",
    "Bankrupt",
    "Prize",
    "WheelField",
    "Wheel",
    "parse_wheel_field",
    "DEFAULT_WHEEL_TOKENS",
]
