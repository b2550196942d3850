from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .models import PlayerMove

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """One accepted move.

    ``payload`` is the guess for letter and solve moves, the success
    probability for SPIN, and None otherwise.
    """

    round_index: int
    player_index: int
    move: PlayerMove
    payload: Optional[Union[str, float]]
    result: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_index": self.round_index,
            "player_index": self.player_index,
            "move": self.move.value,
            "payload": self.payload,
            "result": self.result,
        }


class MoveHistory:
    """In-memory log of the moves a session accepted, in order."""

    def __init__(self) -> None:
        self._records: List[MoveRecord] = []

    def add(self, record: MoveRecord) -> None:
        self._records.append(record)
        logger.debug("Recorded move #%d: %s", len(self._records), record)

    def records(self) -> List[MoveRecord]:
        return list(self._records)
