from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PLACEHOLDER = "_"


class PlayerMove(str, Enum):
    SPIN = "SPIN"
    GUESS_CONSONANT = "GUESS_CONSONANT"
    BUY_VOWEL = "BUY_VOWEL"
    SOLVE = "SOLVE"
    PASS = "PASS"


@dataclass(frozen=True)
class Player:
    """A contestant. Instances are immutable; transitions build updated copies."""

    name: str
    points: int = 0
    prizes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError(f"Player name must be a non-empty string, got {self.name!r}")

    def add_points(self, amount: int) -> "Player":
        return replace(self, points=self.points + amount)

    def spend(self, amount: int) -> "Player":
        return replace(self, points=self.points - amount)

    def bankrupt(self) -> "Player":
        return replace(self, points=0)

    def award_prize(self, prize: str) -> "Player":
        return replace(self, prizes=self.prizes + (prize,))


@dataclass(frozen=True)
class WordPuzzle:
    word: str
    category: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.word, str) or not self.word.strip():
            raise ConfigurationError(f"Puzzle word must be a non-empty string, got {self.word!r}")

    @classmethod
    def coerce(cls, value: Any) -> "WordPuzzle":
        """Accept a WordPuzzle, a plain string or a mapping with a 'word' key."""
        if isinstance(value, WordPuzzle):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, dict) and "word" in value:
            return cls(word=value["word"], category=value.get("category"))
        raise ConfigurationError(f"Cannot build a word puzzle from {value!r}")


def masked(word: str) -> str:
    """Hide every character except spaces."""
    return "".join(" " if ch == " " else PLACEHOLDER for ch in word)


@dataclass(frozen=True)
class Round:
    """One puzzle instance.

    ``display_word`` mirrors ``puzzle.word`` with unrevealed letters replaced by
    the placeholder. ``guesses`` keeps every attempted letter, upper-cased, in
    the order it was tried.
    """

    puzzle: WordPuzzle
    display_word: str = ""
    guesses: Tuple[str, ...] = ()
    is_finished: bool = False
    winner: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.display_word:
            object.__setattr__(self, "display_word", masked(self.puzzle.word))

    @property
    def word(self) -> str:
        return self.puzzle.word

    def has_guessed(self, letter: str) -> bool:
        return letter.upper() in self.guesses

    def reveal(self, letter: str) -> Tuple["Round", int]:
        """Reveal every position matching ``letter`` and record the guess.

        Matching is case-insensitive; revealed positions take the character as
        stored in the puzzle. Positions already revealed stay revealed.

        Returns the updated round and the number of matching positions.
        """
        target = letter.upper()
        hits = 0
        chars = []
        for true_ch, shown_ch in zip(self.puzzle.word, self.display_word):
            if true_ch != " " and true_ch.upper() == target:
                chars.append(true_ch)
                hits += 1
            else:
                chars.append(shown_ch)
        logger.debug("Reveal %r in round puzzle: %d hit(s)", target, hits)
        return replace(self, display_word="".join(chars), guesses=self.guesses + (target,)), hits

    def is_solution(self, guess: str) -> bool:
        return guess.upper() == self.puzzle.word.upper()

    def finish(self, winner: int) -> "Round":
        return replace(self, display_word=self.puzzle.word, is_finished=True, winner=winner)
