"""Core service result types shared by the parse and rename stages.

The parse stage returns a `ParseResult` instead of raising so callers must
handle the failure case explicitly; `unwrap` converts it back to an exception
at the boundary that wants one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.errors import PhotoRenameError
from core.models import PhotoRecord


@dataclass(frozen=True)
class LineTokens:
    """Raw fields of one input line after tokenizing.

    Attributes:
        line_number: 1-based line number in the input.
        base_name: Filename stem before the extension separator.
        extension: Text after the extension separator.
        city: City segment, unvalidated.
        timestamp: Parsed timestamp.
    """

    line_number: int
    base_name: str
    extension: str
    city: str
    timestamp: datetime


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a photo batch.

    Attributes:
        records: Parsed records in input order; empty on failure.
        error: The first validation error encountered, if any.
    """

    records: tuple[PhotoRecord, ...] = ()
    error: PhotoRenameError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[PhotoRecord, ...]:
        """Return the records or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.records

    @classmethod
    def success(cls, records: tuple[PhotoRecord, ...]) -> ParseResult:
        return cls(records=records)

    @classmethod
    def failure(cls, error: PhotoRenameError) -> ParseResult:
        return cls(error=error)
