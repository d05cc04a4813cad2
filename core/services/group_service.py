"""Grouping of photo records by city."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from core.models import CityGroup, PhotoRecord


def group_by_city(records: Iterable[PhotoRecord]) -> list[CityGroup]:
    """Partition `records` by city.

    Cities appear in first-occurrence order and records keep input order
    inside each group. Input is assumed already validated.
    """
    grouped: dict[str, list[PhotoRecord]] = defaultdict(list)
    for record in records:
        grouped[record.city].append(record)
    return [CityGroup(city=city, items=tuple(items)) for city, items in grouped.items()]
