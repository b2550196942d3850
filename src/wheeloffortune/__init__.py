"""
Wheel of Fortune rules engine.

Headless domain logic for a five-round, multiplayer Wheel of Fortune game:
- Player, WordPuzzle and Round models with letter reveal
- A configurable reward Wheel with tagged fields (Cash, LoseTurn, Bankrupt, Prize)
- An immutable GameState and the pure transition function apply_move()
- GameSession, the single entry point for moves (make_move) and snapshots (get_state)
- Typed events (MoveMade, TurnEnded, RoundFinished, GameFinished) on an EventBus

UI layers (CLI, web, etc.) should import and compose these services.
"""
from .config import Alphabet, GameConfig, load_game_config
from .errors import (
    ConfigurationError,
    GameFinishedError,
    IllegalMoveError,
    InsufficientFundsError,
    InvalidGuessError,
    InvalidPayloadError,
    NotYourTurnError,
    UnknownPlayerError,
    WheelOfFortuneError,
)
from .events import GameEvent, GameFinished, MoveMade, RoundFinished, TurnEnded
from .history import MoveRecord
from .models import Player, PlayerMove, Round, WordPuzzle
from .session import GameSession
from .state import GameState
from .transitions import MoveOutcome, apply_move
from .utils.random_provider import RandomProvider, RandomSource
from .wheel import Bankrupt, Cash, LoseTurn, Prize, Wheel

__all__ = [
    "Alphabet",
    "GameConfig",
    "load_game_config",
    "ConfigurationError",
    "GameFinishedError",
    "IllegalMoveError",
    "InsufficientFundsError",
    "InvalidGuessError",
    "InvalidPayloadError",
    "NotYourTurnError",
    "UnknownPlayerError",
    "WheelOfFortuneError",
    "GameEvent",
    "GameFinished",
    "MoveMade",
    "RoundFinished",
    "TurnEnded",
    "MoveRecord",
    "Player",
    "PlayerMove",
    "Round",
    "WordPuzzle",
    "GameSession",
    "GameState",
    "MoveOutcome",
    "apply_move",
    "RandomProvider",
    "RandomSource",
    "Bankrupt",
    "Cash",
    "LoseTurn",
    "Prize",
    "Wheel",
]
