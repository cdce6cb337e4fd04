"""
Constants for fav-cmd.

Used by the store, formatter and CLI. Filter and editor defaults are
also available via the config system.
"""

# Store layout
APP_DIR_NAME = "fav-cmd"
STORE_FILE_NAME = "commands.txt"
CONFIG_FILE_NAME = "config.toml"

# Record format
DELIMITER = "|"
FIELD_COUNT = 3

# Display widths (minimums, longer values are never truncated)
NAME_WIDTH = 30
DESCRIPTION_WIDTH = 50
DISPLAY_SEPARATOR = " | "

# External collaborators
FZF_EXECUTABLE = "fzf"
DEFAULT_EDITOR = "vi"

# fzf exit statuses
FZF_EXIT_SELECTED = 0
FZF_EXIT_NO_MATCH = 1
FZF_EXIT_INTERRUPTED = 130

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
