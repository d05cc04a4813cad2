from __future__ import annotations

from datetime import datetime

import pytest

from core.models import PhotoRecord

FULL_INPUT = (
    "photo.jpg, Krakow, 2013-09-05 14:08:15\n"
    "Mike.png, London, 2015-06-20 15:13:22\n"
    "myFriends.png, Krakow, 2013-09-05 14:07:13\n"
    "Eiffel.jpg, Florianopolis, 2015-07-23 08:03:02\n"
    "pisatower.jpg, Florianopolis, 2015-07-22 23:59:59\n"
    "BOB.jpg, London, 2015-08-05 00:02:03\n"
    "notredame.png, Florianopolis, 2015-09-01 12:00:00\n"
    "me.jpg, Krakow, 2013-09-06 15:40:22\n"
    "a.png, Krakow, 2016-02-13 13:33:50\n"
    "b.jpg, Krakow, 2016-01-02 15:12:22\n"
    "c.jpg, Krakow, 2016-01-02 14:34:30\n"
    "d.jpg, Krakow, 2016-01-02 15:15:01\n"
    "e.png, Krakow, 2016-01-02 09:49:09\n"
    "f.png, Krakow, 2016-01-02 10:55:32\n"
    "g.jpg, Krakow, 2016-02-29 22:13:11"
)

FULL_OUTPUT = (
    "Krakow02.jpg\n"
    "London1.png\n"
    "Krakow01.png\n"
    "Florianopolis2.jpg\n"
    "Florianopolis1.jpg\n"
    "London2.jpg\n"
    "Florianopolis3.png\n"
    "Krakow03.jpg\n"
    "Krakow09.png\n"
    "Krakow07.jpg\n"
    "Krakow06.jpg\n"
    "Krakow08.jpg\n"
    "Krakow04.png\n"
    "Krakow05.png\n"
    "Krakow10.jpg"
)


def ts(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d %H:%M:%S")


def record(index: int, name: str, ext: str, city: str, when: str) -> PhotoRecord:
    return PhotoRecord(
        original_index=index, base_name=name, extension=ext, city=city, timestamp=ts(when)
    )


@pytest.fixture
def three_records() -> list[PhotoRecord]:
    return [
        record(0, "photo", "jpg", "Krakow", "2013-09-05 14:08:15"),
        record(1, "Mike", "png", "London", "2015-06-20 15:13:22"),
        record(2, "myFriends", "png", "Krakow", "2013-09-05 14:07:13"),
    ]
