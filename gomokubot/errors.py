"""Exception hierarchy shared by the game, engine and UI layers."""


class GomokuError(Exception):
    """Base class for all gomokubot errors."""


class ConfigError(GomokuError, ValueError):
    """An engine or board setting is out of range."""


class IllegalMoveError(GomokuError, ValueError):
    """A move was submitted that the rules do not allow."""


class BoardFullError(GomokuError):
    """No empty cell is left, so no move can be chosen."""
