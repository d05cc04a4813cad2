"""Validation errors raised while reading a photo batch.

Every error aborts the whole batch. `str(error)` is the user-facing message;
`kind` names the failure for callers that branch on it.
"""

from __future__ import annotations


class PhotoRenameError(ValueError):
    """Base error for invalid photo batches."""

    kind = "PhotoRename"
    message = "Invalid input"

    def __init__(self, line_number: int | None = None, detail: str | None = None) -> None:
        super().__init__(self.message)
        self.line_number = line_number
        self.detail = detail

    def describe(self) -> str:
        """Return the message with line and detail context for logs."""
        parts = [self.message]
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.detail:
            parts.append(self.detail)
        return " | ".join(parts)


class InvalidCountError(PhotoRenameError):
    kind = "InvalidCount"
    message = "Invalid number of photos"


class InvalidYearError(PhotoRenameError):
    kind = "InvalidYear"
    message = "Invalid year"


class InvalidNameLengthError(PhotoRenameError):
    kind = "InvalidNameLength"
    message = "Invalid photo or city name"


class InvalidCityFormatError(PhotoRenameError):
    kind = "InvalidCityFormat"
    message = "Invalid city name format"


class InvalidExtensionError(PhotoRenameError):
    kind = "InvalidExtension"
    message = "Invalid extension"


class MalformedLineError(PhotoRenameError):
    """Raised when a line does not have the `name.ext, City, timestamp` shape."""

    kind = "MalformedLine"
    message = "Malformed line"
