"""
Flat-file record store for fav-cmd.

The store is a UTF-8 text file with one record per line, fields joined
by ``|`` in the order name, description, command. There is no header
and no escaping. The command is split off last, so it may contain ``|``
itself (shell pipes); name and description may not.

Whole-file rewrites go through a temp file in the same directory that
is moved into place with ``os.replace``, so a crash mid-write never
leaves a truncated store. Nothing prevents two processes from racing:
the last full rewrite wins.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from favcmd.constants import DELIMITER, FIELD_COUNT
from favcmd.exceptions import FavCmdError
from favcmd.models import Command

logger = logging.getLogger(__name__)


def parse_line(line: str, lineno: Optional[int] = None) -> Optional[Command]:
    """
    Parse one store line into a Command.

    Args:
        line: Raw line, with or without its line terminator
        lineno: Line number used in the warning for malformed lines

    Returns:
        The parsed Command, or None for blank and malformed lines
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return None

    where = f"line {lineno}" if lineno is not None else "line"
    parts = line.split(DELIMITER, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        logger.warning(f"Skipping malformed {where}: expected name|description|command, got {line!r}")
        return None

    name, description, command = parts
    if not name.strip() or not command.strip():
        logger.warning(f"Skipping malformed {where}: name and command are required, got {line!r}")
        return None

    return Command(name=name, description=description, command=command)


class CommandStore:
    """
    Reads and writes the ordered sequence of saved commands.

    Args:
        path: Location of the store file
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"CommandStore({str(self.path)!r})"

    def ensure_exists(self) -> None:
        """Create the store file and its parent directories if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            logger.debug(f"Creating empty store at {self.path}")
            self.path.touch()

    def load(self) -> List[Command]:
        """
        Load all records in file order.

        Blank lines are ignored and malformed lines are skipped with a
        warning. A missing file reads as an empty store.

        Raises:
            FavCmdError: If the file is not valid UTF-8
            OSError: If the file exists but cannot be read
        """
        records, _ = self._parse(self._read_lines())
        return records

    def _read_lines(self) -> List[str]:
        """Raw store lines without terminators."""
        if not self.path.exists():
            logger.debug(f"No store at {self.path}, starting empty")
            return []

        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return [line.rstrip("\r\n") for line in f]
        except UnicodeDecodeError as e:
            raise FavCmdError(f"{self.path} is not valid UTF-8: {e}")

    @staticmethod
    def _parse(lines: List[str]) -> Tuple[List[Command], List[int]]:
        """Parse lines into records plus the line position of each record."""
        records = []
        positions = []
        for position, line in enumerate(lines):
            record = parse_line(line, position + 1)
            if record is not None:
                records.append(record)
                positions.append(position)
        return records, positions

    def append(self, record: Command) -> None:
        """
        Append a record as a new last line.

        Raises:
            ValidationError: If the record cannot be stored faithfully
            OSError: On write failure
        """
        record.validate()

        prefix = ""
        if self.path.exists() and self.path.stat().st_size > 0:
            with open(self.path, "rb") as f:
                f.seek(-1, os.SEEK_END)
                if f.read(1) != b"\n":
                    prefix = "\n"

        with open(self.path, "a", encoding="utf-8", newline="") as f:
            f.write(prefix + record.to_line() + "\n")
        logger.debug(f"Appended '{record.name}' to {self.path}")

    def rewrite_excluding(self, index: int, expected: Optional[Command] = None) -> Command:
        """
        Remove the record at a position by rewriting the whole store.

        Lines that do not parse as records are written back unchanged.

        Args:
            index: Zero-based position as returned by load()
            expected: Record the caller saw at that position; if the file
                changed since and holds something else there, nothing is
                removed

        Returns:
            The removed record

        Raises:
            IndexError: If index is out of range (the file is untouched)
            FavCmdError: If the record at index is not the expected one
            OSError: On read or write failure
        """
        lines = self._read_lines()
        records, positions = self._parse(lines)
        if expected is not None and (index >= len(records) or records[index] != expected):
            raise FavCmdError(
                f"{self.path} changed since it was read; '{expected.name}' was not deleted"
            )
        if index < 0 or index >= len(records):
            raise IndexError(f"No command at position {index} (store has {len(records)})")

        removed = records[index]
        skip = positions[index]
        self._write_atomic(line for i, line in enumerate(lines) if i != skip)
        logger.debug(f"Removed '{removed.name}' (position {index}) from {self.path}")
        return removed

    def replace_all(self, records: Iterable[Command]) -> int:
        """
        Overwrite the store with the given records.

        Returns:
            Number of records written
        """
        records = list(records)
        for record in records:
            record.validate()
        self._write_atomic(record.to_line() for record in records)
        return len(records)

    def _write_atomic(self, lines: Iterable[str]) -> None:
        """Write lines to a temp file beside the store, then move it into place."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                for line in lines:
                    f.write(line + "\n")
                f.flush()
                os.fsync(f.fileno())
            if self.path.exists():
                shutil.copymode(self.path, temp_path)
            os.replace(temp_path, self.path)
        except BaseException:
            try:
                os.unlink(temp_path)
            except FileNotFoundError:
                pass
            raise
