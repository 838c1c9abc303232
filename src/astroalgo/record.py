"""Fixed-width text records for tabular output."""

from __future__ import annotations

from typing import TextIO


class Record:
    """One output line built from fields separated by a single blank."""

    def __init__(self) -> None:
        self._fields: list[str] = []

    def clear(self) -> None:
        """Drop all fields."""
        self._fields = []

    def append(self, field: str, width: int = 0) -> None:
        """Append a field, right-aligned to `width` characters when given."""
        self._fields.append(field.rjust(width) if width else field)

    def get_line(self) -> str:
        """Return the line without trailing blanks."""
        return ' '.join(self._fields).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the line (if not blank) and clear the record."""
        line = self.get_line()
        if line:
            stream.write(line + '\n')
        self.clear()
