"""Notifications a GameSession publishes after each accepted move.

Subscribe with the event class, e.g. ``session.events.subscribe(RoundFinished, cb)``.
Every event is immutable and converts to a plain dict with ``to_dict()``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from .models import PlayerMove


@dataclass(frozen=True)
class GameEvent:
    name: ClassVar[str] = "game_event"

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.name, **asdict(self)}


@dataclass(frozen=True)
class MoveMade(GameEvent):
    name: ClassVar[str] = "move_made"

    round_index: int
    player_index: int
    move: PlayerMove
    payload: Optional[Union[str, float]]
    result: Union[int, bool, None]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["move"] = self.move.value
        return data


@dataclass(frozen=True)
class TurnEnded(GameEvent):
    name: ClassVar[str] = "turn_ended"

    previous_player_index: int
    player_index: int


@dataclass(frozen=True)
class RoundFinished(GameEvent):
    name: ClassVar[str] = "round_finished"

    round_index: int
    winner: int
    word: str


@dataclass(frozen=True)
class GameFinished(GameEvent):
    """Final standings. ``points`` is ordered by player index."""

    name: ClassVar[str] = "game_finished"

    points: Tuple[int, ...]
    final_round_winner: int


__all__ = ["GameEvent", "MoveMade", "TurnEnded", "RoundFinished", "GameFinished"]
