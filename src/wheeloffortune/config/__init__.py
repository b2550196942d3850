from .loader import (
    Alphabet,
    GameConfig,
    load_game_config,
    user_config_path,
    validate_vowel_price,
)

__all__ = [
    "Alphabet",
    "GameConfig",
    "load_game_config",
    "user_config_path",
    "validate_vowel_price",
]
