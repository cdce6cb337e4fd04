"""
Display formatting and selection correlation.

Records are shown to the filter as fixed-width ``name | description``
lines. The command is left out to keep the list compact, so a selected
line is mapped back to its record by position, not by parsing.
"""
from typing import List, Optional, Sequence, Tuple

from favcmd.constants import DESCRIPTION_WIDTH, DISPLAY_SEPARATOR, NAME_WIDTH
from favcmd.models import Command


def format_command(record: Command) -> str:
    """Format a record as a display line for the filter."""
    return (
        f"{record.name:<{NAME_WIDTH}}"
        f"{DISPLAY_SEPARATOR}"
        f"{record.description:<{DESCRIPTION_WIDTH}}"
    )


def format_commands(records: Sequence[Command]) -> List[str]:
    """Format all records, keeping positions parallel to the input."""
    return [format_command(r) for r in records]


def correlate(lines: Sequence[str], selection: Optional[str]) -> Optional[int]:
    """
    Find the position of a selected display line.

    Identical lines resolve to the lowest position.

    Args:
        lines: Display lines, parallel to the record sequence
        selection: Line returned by the filter, or None if cancelled

    Returns:
        Zero-based index, or None if nothing was selected or matched
    """
    if selection is None:
        return None
    for index, line in enumerate(lines):
        if line == selection:
            return index
    return None


def find_selected(
    records: Sequence[Command],
    lines: Sequence[str],
    selection: Optional[str],
) -> Optional[Tuple[int, Command]]:
    """Map a selection back to ``(index, record)``, or None."""
    index = correlate(lines, selection)
    if index is None:
        return None
    return index, records[index]
