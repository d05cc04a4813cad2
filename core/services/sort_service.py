"""Sorting service for `CityGroup` collections.

Orders the records of each group chronologically without mutating the groups
or the records themselves.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.models import CityGroup


class SortService:
    """Provides chronological sorting for `CityGroup` lists."""

    def sort(self, groups: Iterable[CityGroup]) -> list[CityGroup]:
        """Return new groups with items ordered by ascending timestamp.

        The sort is stable, so records with identical timestamps keep their
        input order. Group order is preserved.

        Args:
            groups: Iterable of groups to sort.
        """
        return [
            CityGroup(city=group.city, items=tuple(sorted(group.items, key=lambda r: r.timestamp)))
            for group in groups
        ]
