"""
Data model for fav-cmd.

A command bookmark is a name, an optional description and the command
line itself. Records are kept in insertion order; position is the only
identity a record has.
"""
from dataclasses import dataclass

from favcmd.constants import DELIMITER
from favcmd.exceptions import ValidationError


@dataclass(frozen=True)
class Command:
    """
    A saved command line.

    Attributes:
        name: Short label, unique by convention only
        description: Free text shown next to the name (may be empty)
        command: The shell command line, may contain any shell syntax
    """
    name: str
    description: str
    command: str

    def validate(self) -> None:
        """
        Check that the record can be stored and read back unchanged.

        Raises:
            ValidationError: If a required field is empty or a field
                would corrupt the line format
        """
        if not self.name.strip():
            raise ValidationError("Name cannot be empty")
        if not self.command.strip():
            raise ValidationError("Command cannot be empty")

        # The command is the last field, so it may contain the delimiter.
        for label, value in (("Name", self.name), ("Description", self.description)):
            if DELIMITER in value:
                raise ValidationError(f"{label} cannot contain '{DELIMITER}'")

        for label, value in (
            ("Name", self.name),
            ("Description", self.description),
            ("Command", self.command),
        ):
            if "\n" in value or "\r" in value:
                raise ValidationError(f"{label} must be a single line")

    def to_line(self) -> str:
        """Serialize as a store line (without the trailing newline)."""
        return DELIMITER.join((self.name, self.description, self.command))
