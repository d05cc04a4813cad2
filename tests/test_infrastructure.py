from __future__ import annotations

import json
from pathlib import Path

import pytest

from infrastructure.settings import JsonSettings
from infrastructure.text_repository import TextPhotoSource


def test_settings_dotted_lookup(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")

    settings = JsonSettings(path)

    assert settings.get("logging.level") == "DEBUG"
    assert settings.get("logging.dir") is None
    assert settings.get("logging.level.extra", "x") == "x"


def test_settings_without_path_use_defaults() -> None:
    assert JsonSettings().get("logging.level", "WARNING") == "WARNING"


def test_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonSettings(tmp_path / "missing.json")


def test_text_source_reads_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_text("a.jpg, Oslo, 2015-01-01 10:00:00\n", encoding="utf-8")

    assert TextPhotoSource().read(str(path)) == "a.jpg, Oslo, 2015-01-01 10:00:00\n"


def test_text_source_rejects_missing_and_directories(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TextPhotoSource().read(str(tmp_path / "missing.txt"))
    with pytest.raises(FileNotFoundError):
        TextPhotoSource().read(str(tmp_path))


def test_text_source_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(UnicodeDecodeError):
        TextPhotoSource().read(str(path))
