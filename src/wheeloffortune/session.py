from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Union

from .config import Alphabet, GameConfig, validate_vowel_price
from .errors import ConfigurationError, WheelOfFortuneError
from .events import GameFinished, MoveMade, RoundFinished, TurnEnded
from .history import MoveHistory, MoveRecord
from .models import Player, PlayerMove, Round, WordPuzzle
from .state import ROUNDS_PER_GAME, GameState
from .transitions import MoveResult, apply_move, coerce_move
from .utils.events import EventBus
from .utils.random_provider import RandomProvider, RandomSource
from .wheel import Wheel

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


class GameSession:
    """A five-round Wheel of Fortune game.

    The session owns the only reference to the live GameState. Every command
    goes through make_move(), which either swaps in the state produced by
    apply_move() or raises and leaves the session untouched.

    Usage:
        session = GameSession(["Ann", "Bob"], puzzles, rng=RandomProvider(seed=7))
        session.make_move(0, PlayerMove.SPIN)
        session.make_move(0, PlayerMove.GUESS_CONSONANT, guess="T")
        snapshot = session.get_state()

    Events published on ``events`` after each accepted move: MoveMade, then
    RoundFinished when the move solved the puzzle, then GameFinished or
    TurnEnded when the game ended or the turn passed.
    """

    def __init__(
        self,
        player_names: Sequence[str],
        puzzles: Sequence[Union[WordPuzzle, str, dict]],
        wheel: Optional[Union[Wheel, Iterable[Any]]] = None,
        vowel_price: Optional[int] = None,
        *,
        config: Optional[GameConfig] = None,
        alphabet: Optional[Alphabet] = None,
        rng: Optional[RandomSource] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        if len(puzzles) < ROUNDS_PER_GAME:
            raise ConfigurationError(
                f"Wheel of Fortune requires a dictionary of at least {ROUNDS_PER_GAME} word puzzles, got {len(puzzles)}"
            )
        if len(player_names) < MIN_PLAYERS:
            raise ConfigurationError(f"Wheel of Fortune requires at least {MIN_PLAYERS} players")

        cfg = config if config is not None else GameConfig.default()
        if wheel is None:
            wheel = cfg.wheel
        elif not isinstance(wheel, Wheel):
            wheel = Wheel.from_tokens(wheel)
        price = validate_vowel_price(cfg.vowel_price if vowel_price is None else vowel_price)

        self._rng: RandomSource = rng if rng is not None else RandomProvider()
        self.events = events if events is not None else EventBus()
        self._history = MoveHistory()
        self._state = GameState(
            players=tuple(Player(name) for name in player_names),
            rounds=self._create_rounds(puzzles),
            wheel=wheel,
            vowel_price=price,
            alphabet=alphabet if alphabet is not None else cfg.alphabet,
        )
        logger.info(
            "New game: players=%s wheel=%d fields vowel_price=%d",
            [p.name for p in self._state.players],
            len(wheel),
            price,
        )

    def _create_rounds(self, puzzles: Sequence[Union[WordPuzzle, str, dict]]) -> tuple:
        indexes: List[int] = self._rng.sample(range(len(puzzles)), ROUNDS_PER_GAME)
        logger.debug("Puzzle indexes drawn for rounds: %s", indexes)
        return tuple(Round(WordPuzzle.coerce(puzzles[i])) for i in indexes)

    # ---------------------- Public API ----------------------
    def get_state(self) -> GameState:
        """Return the current immutable snapshot."""
        return self._state

    @property
    def history(self) -> List[MoveRecord]:
        return self._history.records()

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    def make_move(
        self,
        player_index: int,
        move: Union[PlayerMove, str],
        guess: Optional[str] = None,
        success_probability: Optional[float] = None,
    ) -> MoveResult:
        """Validate and perform a move for ``player_index``.

        Raises one of the WheelOfFortuneError subclasses if the move is not
        allowed; the session state is unchanged in that case.
        """
        before = self._state
        try:
            outcome = apply_move(
                before,
                player_index,
                move,
                rng=self._rng,
                guess=guess,
                success_probability=success_probability,
            )
        except WheelOfFortuneError as exc:
            logger.debug("Rejected %r from player %r: %s", move, player_index, exc)
            raise

        move = coerce_move(move)
        self._state = outcome.state
        payload = success_probability if move is PlayerMove.SPIN else guess
        record = MoveRecord(
            round_index=before.current_round_index,
            player_index=player_index,
            move=move,
            payload=payload,
            result=outcome.result,
        )
        self._history.add(record)
        logger.info(
            "Round %d: %s plays %s(%s) -> %r",
            before.current_round_index,
            before.current_player.name,
            move.value,
            "" if payload is None else payload,
            outcome.result,
        )
        self._publish(before, record)
        return outcome.result

    # ---------------------- Internal ----------------------
    def _publish(self, before: GameState, record: MoveRecord) -> None:
        after = self._state
        self.events.publish(
            MoveMade(
                round_index=record.round_index,
                player_index=record.player_index,
                move=record.move,
                payload=record.payload,
                result=record.result,
            )
        )
        played_round = after.rounds[before.current_round_index]
        if played_round.is_finished:
            self.events.publish(
                RoundFinished(
                    round_index=before.current_round_index,
                    winner=before.current_player_index,
                    word=played_round.word,
                )
            )
        if after.is_finished:
            self.events.publish(
                GameFinished(
                    points=tuple(p.points for p in after.players),
                    final_round_winner=after.current_player_index,
                )
            )
        elif not played_round.is_finished and after.current_player_index != before.current_player_index:
            self.events.publish(
                TurnEnded(previous_player_index=before.current_player_index, player_index=after.current_player_index)
            )


__all__ = ["GameSession"]
