"""Exceptions raised by fav-cmd."""


class FavCmdError(Exception):
    """Base exception for fav-cmd errors."""
    pass


class DependencyMissing(FavCmdError):
    """Raised when a required external program is not installed."""
    pass


class ValidationError(FavCmdError):
    """Raised when a command record fails validation."""
    pass


class SelectorError(FavCmdError):
    """Raised when the interactive filter fails for a reason other than cancellation."""
    pass
