"""Pure state transitions for a Wheel of Fortune session.

``apply_move`` is the whole rule set: it takes a GameState and a move and
returns a new GameState with the move's result, or raises without producing
anything. Randomness is only consumed by SPIN, through the injected source.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from .errors import (
    GameFinishedError,
    IllegalMoveError,
    InsufficientFundsError,
    InvalidGuessError,
    NotYourTurnError,
    UnknownPlayerError,
)
from .models import PlayerMove
from .state import (
    AFTER_SPIN_MOVES,
    CONTINUE_TURN_MOVES,
    NO_MOVES,
    START_TURN_MOVES,
    GameState,
)
from .utils.random_provider import RandomSource
from .wheel import Bankrupt, Cash, LoseTurn, Prize

logger = logging.getLogger(__name__)

MoveResult = Union[int, bool, None]


@dataclass(frozen=True)
class MoveOutcome:
    state: GameState
    result: MoveResult = None


# ---------------------- Lifecycle ----------------------

def end_turn(state: GameState) -> GameState:
    """Hand the turn to the next player, dropping any unresolved stake."""
    nxt = (state.current_player_index + 1) % len(state.players)
    logger.debug("Turn ends: player %d -> %d", state.current_player_index, nxt)
    return replace(
        state,
        current_player_index=nxt,
        possible_moves=START_TURN_MOVES,
        points_to_win=0,
        pending_prize=None,
    )


def end_round(state: GameState, winner: int) -> GameState:
    """Finish the current round with ``winner``.

    The winner opens the next round. Finishing the last round finishes the
    session and leaves no legal moves.
    """
    state = replace(
        state.with_current_round(state.current_round.finish(winner)),
        points_to_win=0,
        pending_prize=None,
    )
    if state.current_round_index >= len(state.rounds) - 1:
        logger.debug("Final round %d won by player %d; session finished", state.current_round_index, winner)
        return replace(state, is_finished=True, possible_moves=NO_MOVES, current_player_index=winner)

    logger.debug("Round %d won by player %d", state.current_round_index, winner)
    return replace(
        state,
        current_round_index=state.current_round_index + 1,
        current_player_index=winner,
        possible_moves=START_TURN_MOVES,
    )


# ---------------------- Validation ----------------------

def coerce_move(move: Union[PlayerMove, str]) -> PlayerMove:
    if isinstance(move, PlayerMove):
        return move
    if isinstance(move, str):
        try:
            return PlayerMove(move.strip().upper())
        except ValueError:
            pass
    raise IllegalMoveError(f"Unknown move: {move!r}")


def check_move_allowed(state: GameState, player_index: Any, move: Union[PlayerMove, str]) -> PlayerMove:
    """Run the preconditions shared by every move, in order."""
    if state.is_finished:
        raise GameFinishedError("Game is finished")
    if isinstance(player_index, bool) or not isinstance(player_index, int) or not 0 <= player_index < len(state.players):
        raise UnknownPlayerError(player_index)
    if player_index != state.current_player_index:
        raise NotYourTurnError(player_index, state.current_player_index)
    move = coerce_move(move)
    if move not in state.possible_moves:
        raise IllegalMoveError(f"Player {player_index} can't make move {move.value}")
    return move


def _letter(guess: Any, is_member: Callable[[str], bool], kind: str) -> str:
    if not isinstance(guess, str) or len(guess) != 1 or not is_member(guess):
        raise InvalidGuessError(f"Invalid {kind} guess: {guess!r}")
    return guess.upper()


# ---------------------- Move handlers ----------------------

def _spin(state: GameState, rng: RandomSource, success_probability: Optional[float]) -> MoveOutcome:
    p = 1.0 if success_probability is None else success_probability
    index = state.wheel.spin(rng, p)
    if index is None:
        return MoveOutcome(end_turn(state), None)

    field = state.wheel[index]
    if isinstance(field, Cash):
        new_state = replace(state, points_to_win=field.amount, pending_prize=None, possible_moves=AFTER_SPIN_MOVES)
    elif isinstance(field, Prize):
        new_state = replace(state, points_to_win=0, pending_prize=field.name, possible_moves=AFTER_SPIN_MOVES)
    elif isinstance(field, Bankrupt):
        i = state.current_player_index
        new_state = end_turn(state.with_player(i, state.players[i].bankrupt()))
    elif isinstance(field, LoseTurn):
        new_state = end_turn(state)
    else:  # pragma: no cover - Wheel only holds the four field kinds
        raise TypeError(f"Unsupported wheel field: {field!r}")
    return MoveOutcome(new_state, index)


def _guess_consonant(state: GameState, guess: Any) -> MoveOutcome:
    letter = _letter(guess, state.alphabet.is_consonant, "consonant")
    if state.current_round.has_guessed(letter):
        logger.debug("Consonant %r already guessed this round; ignoring", letter)
        return MoveOutcome(state, None)

    revealed, hits = state.current_round.reveal(letter)
    new_state = state.with_current_round(revealed)
    if not hits:
        return MoveOutcome(end_turn(new_state), 0)

    i = state.current_player_index
    player = state.players[i].add_points(state.points_to_win * hits)
    if state.pending_prize is not None:
        player = player.award_prize(state.pending_prize)
    new_state = replace(
        new_state.with_player(i, player),
        points_to_win=0,
        pending_prize=None,
        possible_moves=CONTINUE_TURN_MOVES,
    )
    return MoveOutcome(new_state, hits)


def _buy_vowel(state: GameState, guess: Any) -> MoveOutcome:
    letter = _letter(guess, state.alphabet.is_vowel, "vowel")
    if state.current_round.has_guessed(letter):
        logger.debug("Vowel %r already guessed this round; ignoring", letter)
        return MoveOutcome(state, None)

    i = state.current_player_index
    player = state.players[i]
    if player.points < state.vowel_price:
        raise InsufficientFundsError(
            f"{player.name} needs {state.vowel_price - player.points} more points to buy a vowel"
        )

    revealed, hits = state.current_round.reveal(letter)
    # The price is paid whether or not the vowel is in the puzzle.
    new_state = state.with_player(i, player.spend(state.vowel_price)).with_current_round(revealed)
    if not hits:
        return MoveOutcome(end_turn(new_state), 0)
    return MoveOutcome(replace(new_state, points_to_win=0, possible_moves=CONTINUE_TURN_MOVES), hits)


def _solve(state: GameState, guess: Any) -> MoveOutcome:
    if not isinstance(guess, str) or not guess.strip():
        raise InvalidGuessError("Solve guess can't be empty")

    if state.current_round.is_solution(guess.strip()):
        return MoveOutcome(end_round(state, state.current_player_index), True)
    return MoveOutcome(end_turn(state), False)


def apply_move(
    state: GameState,
    player_index: int,
    move: Union[PlayerMove, str],
    *,
    rng: RandomSource,
    guess: Optional[str] = None,
    success_probability: Optional[float] = None,
) -> MoveOutcome:
    """Validate and apply one move.

    Args:
        state: The state the move is applied to. It is never modified.
        player_index: Index of the player submitting the move.
        move: A PlayerMove or its name.
        rng: Randomness for SPIN.
        guess: Letter for GUESS_CONSONANT / BUY_VOWEL, phrase for SOLVE.
        success_probability: Optional spin success probability for SPIN.

    Returns:
        MoveOutcome with the new state and the move-specific result: the wheel
        field index (or None) for SPIN, the hit count (or None for a repeated
        letter) for letter moves, a bool for SOLVE and None for PASS.
    """
    move = check_move_allowed(state, player_index, move)

    if move is PlayerMove.SPIN:
        return _spin(state, rng, success_probability)
    if move is PlayerMove.GUESS_CONSONANT:
        return _guess_consonant(state, guess)
    if move is PlayerMove.BUY_VOWEL:
        return _buy_vowel(state, guess)
    if move is PlayerMove.SOLVE:
        return _solve(state, guess)
    return MoveOutcome(end_turn(state), None)


__all__ = [
    "MoveOutcome",
    "MoveResult",
    "apply_move",
    "check_move_allowed",
    "coerce_move",
    "end_round",
    "end_turn",
]
