"""Parsing and validation of raw photo batches.

Each line reads `<basename>.<ext>, <City>, <YYYY-MM-DD HH:MM:SS>`. Lines are
tokenized explicitly (no pattern matching) and then validated in a fixed
order. Every line is checked before any record is built, and the first
violation fails the whole batch.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from core.errors import (
    InvalidCityFormatError,
    InvalidCountError,
    InvalidExtensionError,
    InvalidNameLengthError,
    InvalidYearError,
    MalformedLineError,
    PhotoRenameError,
)
from core.models import PhotoRecord
from core.services.interfaces import LineTokens, ParseResult

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_SHAPE = "dddd-dd-dd dd:dd:dd"
ASCII_DIGITS = frozenset("0123456789")
FIELD_SEPARATOR = ", "
EXTENSION_SEPARATOR = "."

MIN_PHOTOS = 1
MAX_PHOTOS = 100
MIN_YEAR = 2000
MAX_YEAR = 2020
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 20
ALLOWED_EXTENSIONS = frozenset({"jpg", "png", "jpeg"})


def split_lines(text: str) -> list[str]:
    """Split `text` on line breaks, dropping trailing empty lines."""
    lines = text.replace("\r\n", "\n").split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


def has_timestamp_shape(value: str) -> bool:
    """Return True when ASCII digits and separators sit exactly where TIMESTAMP_FMT puts them."""
    # strptime alone accepts unpadded fields, runs of whitespace and non-ASCII digits
    if len(value) != len(TIMESTAMP_SHAPE):
        return False
    return all(
        ch in ASCII_DIGITS if slot == "d" else ch == slot
        for ch, slot in zip(value, TIMESTAMP_SHAPE)
    )


def parse_timestamp(value: str) -> datetime | None:
    """Parse `value` using TIMESTAMP_FMT; return None on any deviation."""
    if not has_timestamp_shape(value):
        return None
    try:
        return datetime.strptime(value, TIMESTAMP_FMT)
    except ValueError:
        return None


def tokenize_line(line: str, line_number: int) -> LineTokens:
    """Split one line into its fields.

    Raises:
        MalformedLineError: if the segment counts or timestamp are wrong.
    """
    segments = line.split(FIELD_SEPARATOR)
    if len(segments) != 3:
        raise MalformedLineError(line_number, f"expected 3 fields, got {len(segments)}: {line!r}")
    filename, city, raw_timestamp = segments

    name_parts = filename.split(EXTENSION_SEPARATOR)
    if len(name_parts) != 2:
        raise MalformedLineError(line_number, f"expected one extension separator: {filename!r}")
    base_name, extension = name_parts

    timestamp = parse_timestamp(raw_timestamp)
    if timestamp is None:
        raise MalformedLineError(line_number, f"bad timestamp: {raw_timestamp!r}")

    return LineTokens(
        line_number=line_number,
        base_name=base_name,
        extension=extension,
        city=city,
        timestamp=timestamp,
    )


def is_title_case(city: str) -> bool:
    """Return True when the first letter is uppercase and the rest lowercase."""
    return city[:1].isupper() and city[1:] == city[1:].lower()


def _length_ok(value: str) -> bool:
    return MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH


def validate_tokens(tokens: LineTokens) -> None:
    """Check one tokenized line.

    Raises:
        InvalidYearError, InvalidNameLengthError, InvalidCityFormatError,
        InvalidExtensionError
    """
    n = tokens.line_number
    if not MIN_YEAR <= tokens.timestamp.year <= MAX_YEAR:
        raise InvalidYearError(n, f"year {tokens.timestamp.year}")
    if not (_length_ok(tokens.base_name) and _length_ok(tokens.city)):
        raise InvalidNameLengthError(n, f"name={tokens.base_name!r} city={tokens.city!r}")
    if not is_title_case(tokens.city):
        raise InvalidCityFormatError(n, f"city={tokens.city!r}")
    if tokens.extension not in ALLOWED_EXTENSIONS:
        raise InvalidExtensionError(n, f"extension={tokens.extension!r}")


def parse_photos(text: str) -> ParseResult:
    """Parse and validate a whole batch.

    Returns a failed `ParseResult` carrying the first error instead of raising.
    """
    lines = split_lines(text)
    if not MIN_PHOTOS <= len(lines) <= MAX_PHOTOS:
        return ParseResult.failure(InvalidCountError(detail=f"{len(lines)} lines"))

    tokenized: list[LineTokens] = []
    for number, line in enumerate(lines, start=1):
        try:
            tokens = tokenize_line(line, number)
            validate_tokens(tokens)
        except PhotoRenameError as ex:
            logger.debug("Rejected batch: {}", ex.describe())
            return ParseResult.failure(ex)
        tokenized.append(tokens)

    records = tuple(
        PhotoRecord(
            original_index=index,
            base_name=t.base_name,
            extension=t.extension,
            city=t.city,
            timestamp=t.timestamp,
        )
        for index, t in enumerate(tokenized)
    )
    logger.debug("Parsed {} photo records", len(records))
    return ParseResult.success(records)
