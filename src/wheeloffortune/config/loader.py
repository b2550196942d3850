from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

import yaml
from platformdirs import user_config_dir

from ..errors import ConfigurationError
from ..wheel import DEFAULT_WHEEL_TOKENS, Wheel

logger = logging.getLogger(__name__)

APP_NAME = "wheeloffortune"
CONFIG_ENV = "WOF_CONFIG"
USER_CONFIG_FILENAME = "settings.yaml"

DEFAULT_VOWEL_PRICE = 1000
DEFAULT_VOWELS = "AEIOUY"
DEFAULT_CONSONANTS = "BCDFGHJKLMNPQRSTVWXZ"


@dataclass(frozen=True)
class Alphabet:
    """Letter classes a guess is validated against. Letters are stored upper-cased."""

    consonants: FrozenSet[str]
    vowels: FrozenSet[str]

    def __post_init__(self) -> None:
        if not self.consonants or not self.vowels:
            raise ConfigurationError("Alphabet needs at least one consonant and one vowel")
        overlap = self.consonants & self.vowels
        if overlap:
            raise ConfigurationError(f"Letters cannot be both consonant and vowel: {sorted(overlap)}")
        for letter in self.consonants | self.vowels:
            if len(letter) != 1 or letter == " ":
                raise ConfigurationError(f"Alphabet entries must be single non-space characters, got {letter!r}")

    @classmethod
    def from_strings(cls, consonants: Iterable[str], vowels: Iterable[str]) -> "Alphabet":
        """Build from strings ("BCD") or sequences of letters ([B, C, D])."""
        return cls(
            consonants=frozenset(str(c).upper() for c in consonants),
            vowels=frozenset(str(v).upper() for v in vowels),
        )

    @classmethod
    def default(cls) -> "Alphabet":
        return cls.from_strings(DEFAULT_CONSONANTS, DEFAULT_VOWELS)

    def is_consonant(self, letter: str) -> bool:
        return len(letter) == 1 and letter.upper() in self.consonants

    def is_vowel(self, letter: str) -> bool:
        return len(letter) == 1 and letter.upper() in self.vowels


@dataclass(frozen=True)
class GameConfig:
    """
    Session configuration with defaults shipped in defaults.yaml.

    Override by pointing WOF_CONFIG at a YAML file, or by placing settings.yaml
    in the user config directory. Recognised keys:
      - wheel: list of fields (ints, LOSE_TURN, BANKRUPT, PRIZE or PRIZE:<name>)
      - vowel_price: positive int (default 1000)
      - alphabet: {consonants: str, vowels: str}
    """

    wheel: Wheel
    vowel_price: int = DEFAULT_VOWEL_PRICE
    alphabet: Alphabet = Alphabet.default()

    def __post_init__(self) -> None:
        validate_vowel_price(self.vowel_price)

    @staticmethod
    def default() -> "GameConfig":
        return GameConfig.from_dict({})

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GameConfig":
        """Build a config, taking missing keys from the packaged defaults."""
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping")
        defaults = _load_packaged_defaults()
        merged = {**defaults, **data}

        wheel_tokens = merged.get("wheel", DEFAULT_WHEEL_TOKENS)
        if not isinstance(wheel_tokens, (list, tuple)):
            raise ConfigurationError("'wheel' must be a list of fields")

        override = data.get("alphabet") or {}
        if not isinstance(override, dict):
            raise ConfigurationError("'alphabet' must be a mapping with consonants and vowels")
        alphabet_raw = {**(defaults.get("alphabet") or {}), **override}
        alphabet = Alphabet.from_strings(
            _letters(alphabet_raw, "consonants", DEFAULT_CONSONANTS),
            _letters(alphabet_raw, "vowels", DEFAULT_VOWELS),
        )
        return GameConfig(
            wheel=Wheel.from_tokens(wheel_tokens),
            vowel_price=merged.get("vowel_price", DEFAULT_VOWEL_PRICE),
            alphabet=alphabet,
        )


def _letters(raw: Dict[str, Any], key: str, default: str) -> Iterable[str]:
    value = raw.get(key, default)
    if not isinstance(value, (str, list, tuple)):
        raise ConfigurationError(f"alphabet.{key} must be a string or a list of letters, got {value!r}")
    return value


def validate_vowel_price(price: Any) -> int:
    if isinstance(price, bool) or not isinstance(price, int) or price <= 0:
        raise ConfigurationError(f"Vowel price must be a positive integer, got {price!r}")
    return price


_packaged_cache: Dict[str, Any] = {}


def _load_packaged_defaults() -> Dict[str, Any]:
    if not _packaged_cache:
        text = resource_files("wheeloffortune.config").joinpath("defaults.yaml").read_text(encoding="utf-8")
        _packaged_cache.update(yaml.safe_load(text) or {})
        logger.debug("Loaded embedded default config resource")
    return _packaged_cache


def user_config_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / USER_CONFIG_FILENAME


def load_game_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load the session configuration from YAML.

    Resolution order: explicit path, WOF_CONFIG env var, settings.yaml in the
    user config directory, then the packaged defaults.
    """
    candidate: Optional[Path] = None
    if path is not None:
        candidate = Path(path)
    elif os.getenv(CONFIG_ENV):
        candidate = Path(os.environ[CONFIG_ENV])
    elif user_config_path().exists():
        candidate = user_config_path()

    if candidate is None:
        logger.debug("No config override found; using packaged defaults")
        return GameConfig.default()

    try:
        raw = yaml.safe_load(candidate.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {candidate}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {candidate}: {exc}") from exc

    config = GameConfig.from_dict(raw)
    logger.info(
        "Loaded game config from %s | wheel=%d fields vowel_price=%d",
        candidate,
        len(config.wheel),
        config.vowel_price,
    )
    return config
