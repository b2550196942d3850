from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .config import Alphabet
from .models import Player, PlayerMove, Round
from .wheel import Wheel

ROUNDS_PER_GAME = 5

CONTINUE_TURN_MOVES: FrozenSet[PlayerMove] = frozenset(
    {PlayerMove.SPIN, PlayerMove.SOLVE, PlayerMove.BUY_VOWEL, PlayerMove.PASS}
)
AFTER_SPIN_MOVES: FrozenSet[PlayerMove] = frozenset({PlayerMove.GUESS_CONSONANT, PlayerMove.PASS})
START_TURN_MOVES: FrozenSet[PlayerMove] = frozenset({PlayerMove.SPIN})
NO_MOVES: FrozenSet[PlayerMove] = frozenset()


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a whole session.

    Transitions never modify a GameState; they return a new one, so a snapshot
    handed to a presentation layer stays valid after further moves.
    """

    players: Tuple[Player, ...]
    rounds: Tuple[Round, ...]
    wheel: Wheel
    vowel_price: int
    alphabet: Alphabet
    current_player_index: int = 0
    current_round_index: int = 0
    possible_moves: FrozenSet[PlayerMove] = START_TURN_MOVES
    points_to_win: int = 0
    pending_prize: Optional[str] = None
    is_finished: bool = False

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def current_round(self) -> Round:
        return self.rounds[self.current_round_index]

    def with_player(self, index: int, player: Player) -> "GameState":
        players = self.players[:index] + (player,) + self.players[index + 1:]
        return replace(self, players=players)

    def with_current_round(self, round_: Round) -> "GameState":
        i = self.current_round_index
        return replace(self, rounds=self.rounds[:i] + (round_,) + self.rounds[i + 1:])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict for presentation layers.

        The secret phrase is included only for finished rounds.
        """
        return {
            "players": [
                {"name": p.name, "points": p.points, "prizes": list(p.prizes)} for p in self.players
            ],
            "rounds": [_round_to_dict(r) for r in self.rounds],
            "current_player_index": self.current_player_index,
            "current_player_possible_moves": [m.value for m in PlayerMove if m in self.possible_moves],
            "current_round_index": self.current_round_index,
            "points_to_win": self.points_to_win,
            "pending_prize": self.pending_prize,
            "is_finished": self.is_finished,
            "wheel": self.wheel.to_tokens(),
            "vowel_price": self.vowel_price,
        }


def _round_to_dict(r: Round) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "display_word": r.display_word,
        "guesses": list(r.guesses),
        "is_finished": r.is_finished,
        "winner": r.winner,
        "category": r.puzzle.category,
    }
    if r.is_finished:
        data["word"] = r.word
    return data
