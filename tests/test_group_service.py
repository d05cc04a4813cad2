from __future__ import annotations

from core.models import CityGroup, PhotoRecord
from core.services.group_service import group_by_city


def test_groups_by_city_in_first_seen_order(three_records: list[PhotoRecord]) -> None:
    groups = group_by_city(three_records)

    assert groups == [
        CityGroup(city="Krakow", items=(three_records[0], three_records[2])),
        CityGroup(city="London", items=(three_records[1],)),
    ]


def test_every_record_lands_in_exactly_one_group(three_records: list[PhotoRecord]) -> None:
    groups = group_by_city(three_records)
    flattened = [r for g in groups for r in g.items]

    assert sorted(flattened, key=lambda r: r.original_index) == three_records
    assert sum(g.size for g in groups) == len(three_records)


def test_group_records_are_the_same_objects(three_records: list[PhotoRecord]) -> None:
    groups = group_by_city(three_records)

    assert groups[0].items[0] is three_records[0]


def test_empty_input_gives_no_groups() -> None:
    assert group_by_city([]) == []
