"""Core domain models for photo records and city groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PhotoRecord:
    """A single validated photo line from the input batch."""

    original_index: int
    base_name: str
    extension: str
    city: str
    timestamp: datetime


@dataclass(frozen=True)
class CityGroup:
    """Photo records that share the same `city`."""

    city: str
    items: tuple[PhotoRecord, ...] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.items)
