"""
fav-cmd - favorite command lines

Keeps short name/description/command bookmarks in a flat text file and
lets you pick one with fzf for reuse in the shell.

Example Usage:
    >>> from favcmd import Command, CommandStore
    >>> store = CommandStore("commands.txt")
    >>> store.append(Command("git-status", "Show working tree status", "git status"))
    >>> [c.name for c in store.load()]
    ['git-status']
"""

__version__ = "0.1.0"
__author__ = "fav-cmd Contributors"

# Records and storage
from favcmd.models import Command
from favcmd.store import CommandStore

# Configuration
from favcmd.config import FavCmdConfig, get_config

# Selection
from favcmd.formatting import format_command, correlate
from favcmd.selector import Selector, FzfSelector

# Errors
from favcmd.exceptions import (
    FavCmdError,
    DependencyMissing,
    ValidationError,
    SelectorError,
)

__all__ = [
    "Command",
    "CommandStore",
    "FavCmdConfig",
    "get_config",
    "format_command",
    "correlate",
    "Selector",
    "FzfSelector",
    "FavCmdError",
    "DependencyMissing",
    "ValidationError",
    "SelectorError",
]
