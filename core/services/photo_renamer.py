"""Pipeline orchestrating parse, group, sort and rename stages."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from core.models import CityGroup, PhotoRecord
from core.services.group_service import group_by_city
from core.services.interfaces import ParseResult
from core.services.parse_service import parse_photos
from core.services.rename_service import render_names, rename_records
from core.services.sort_service import SortService


class PhotoRenamer:
    """Renames a batch of photos described as text.

    Each stage is exposed separately so callers can inspect intermediate
    results; `photo_renamer` runs them all.
    """

    def __init__(self, sorter: SortService | None = None) -> None:
        """Create a PhotoRenamer.

        Args:
            sorter: Sorting service (defaults to `SortService`).
        """
        self._sorter = sorter or SortService()

    def photo_renamer(self, input_string: str) -> str:
        """Return the renamed batch, one name per input line.

        Raises:
            PhotoRenameError: if the batch fails validation.
        """
        records = self.parse_photos_from_string(input_string).unwrap()
        groups = self.group_photos_by_city(records)
        sorted_groups = self.sort_photos_by_city_and_time(groups)
        logger.debug("Renaming {} photos across {} cities", len(records), len(sorted_groups))
        return self.rename_photos(sorted_groups)

    def parse_photos_from_string(self, input_string: str) -> ParseResult:
        return parse_photos(input_string)

    def group_photos_by_city(self, records: Iterable[PhotoRecord]) -> list[CityGroup]:
        return group_by_city(records)

    def sort_photos_by_city_and_time(self, groups: Iterable[CityGroup]) -> list[CityGroup]:
        return self._sorter.sort(groups)

    def rename_photos(self, sorted_groups: Iterable[CityGroup]) -> str:
        return render_names(rename_records(sorted_groups))
