"""Exceptions raised by astroalgo.

All errors derive from ValueError so callers that already guard numeric input
with ``except ValueError`` keep working.
"""

from __future__ import annotations


class AstroAlgoError(ValueError):
    """Base class for astroalgo errors."""


class InvalidTimeZoneError(AstroAlgoError):
    """Time zone identifier could not be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown time zone {name!r}')
        self.name = name


class NonFiniteAngleError(AstroAlgoError):
    """NaN or infinite value passed where a finite angle is required."""

    def __init__(self, value: float) -> None:
        super().__init__(f'Cannot normalize non-finite angle {value!r}')
        self.value = value


class TheoryTableNotFoundError(AstroAlgoError):
    """No VSOP87 table file exists for the requested body."""

    def __init__(self, body: str, searched: list[str]) -> None:
        paths = ', '.join(searched) if searched else '(none)'
        super().__init__(f'No VSOP87 table for {body!r}; searched: {paths}')
        self.body = body
        self.searched = searched


class TheoryTableFormatError(AstroAlgoError):
    """A VSOP87 table file is malformed."""

    def __init__(self, path: str, line_number: int, message: str) -> None:
        super().__init__(f'{path}:{line_number}: {message}')
        self.path = path
        self.line_number = line_number
