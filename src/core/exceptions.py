"""Custom exceptions shared by all layers. Catch GameError to handle any of them."""


class GameError(Exception):
    """Base class for every error raised by the application."""


class InvalidRequestError(GameError):
    """Request data that cannot be interpreted (raised by the API models)."""


class InvalidBoardError(GameError):
    """A board code that does not describe a 3x3 tic-tac-toe board."""


class GameStateError(GameError):
    """Stored game data that breaks the rules of the game."""


class RepositoryError(GameError):
    """Game could not be found / stored."""
