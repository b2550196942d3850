class WheelOfFortuneError(Exception):
    """Base error for Wheel of Fortune engine exceptions."""


class ConfigurationError(WheelOfFortuneError):
    """Raised when a session or configuration file cannot be built from the given inputs."""


class GameFinishedError(WheelOfFortuneError):
    """Raised when a move is attempted after the last round has been solved."""


class UnknownPlayerError(WheelOfFortuneError):
    """Raised when a player index does not address an existing player."""

    def __init__(self, player_index):
        self.player_index = player_index
        super().__init__(f"Player {player_index} doesn't exist")


class NotYourTurnError(WheelOfFortuneError):
    """Raised when a player moves while it is someone else's turn."""

    def __init__(self, player_index, current_player_index):
        self.player_index = player_index
        self.current_player_index = current_player_index
        super().__init__(
            f"It's not player {player_index}'s turn (current player: {current_player_index})"
        )


class IllegalMoveError(WheelOfFortuneError):
    """Raised when the requested move is not in the current legal-move set."""


class InvalidPayloadError(WheelOfFortuneError):
    """Raised when the payload accompanying a move is malformed."""


class InvalidGuessError(InvalidPayloadError):
    """Raised when a guess is empty, has the wrong length or the wrong letter class."""


class InsufficientFundsError(WheelOfFortuneError):
    """Raised when a vowel purchase cannot be paid for."""
