"""Rename generation for chronologically sorted city groups.

New names take the form `<City><NN>.<ext>`, where `NN` is the 1-based
chronological rank zero-padded to the digit count of the city's group size.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from core.models import CityGroup

OUTPUT_SEPARATOR = "\n"


def digit_width(count: int) -> int:
    """Return the decimal digit count of `count`."""
    return len(str(count))


def rename_group(group: CityGroup) -> list[tuple[int, str]]:
    """Return `(original_index, new_name)` pairs for an already sorted group."""
    width = digit_width(group.size)
    return [
        (record.original_index, f"{group.city}{seq:0{width}d}.{record.extension}")
        for seq, record in enumerate(group.items, start=1)
    ]


def rename_records(groups: Iterable[CityGroup]) -> list[str]:
    """Rename every record and place each name at its original input position."""
    pairs: list[tuple[int, str]] = []
    for group in groups:
        pairs.extend(rename_group(group))

    names: list[str] = [""] * len(pairs)
    placed: set[int] = set()
    for index, name in pairs:
        if not 0 <= index < len(names) or index in placed:
            raise ValueError(f"original_index values are not a permutation: {index}")
        placed.add(index)
        names[index] = name
    logger.debug("Renamed {} photos", len(names))
    return names


def render_names(names: Sequence[str]) -> str:
    """Join renamed entries into the output text."""
    return OUTPUT_SEPARATOR.join(names)
