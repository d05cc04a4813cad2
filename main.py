from __future__ import annotations

import argparse
import os
from pathlib import Path
import sys

from loguru import logger

from core.errors import PhotoRenameError
from core.services.photo_renamer import PhotoRenamer
from infrastructure.logging import DEFAULT_LEVEL, init_logging
from infrastructure.settings import JsonSettings
from infrastructure.text_repository import TextPhotoSource

BASE_DIR = Path(__file__).parent
SETTINGS_ENV = "PHOTO_RENAMER_SETTINGS"


def _load_settings() -> JsonSettings:
    # An explicit path must exist; the bundled default is optional
    explicit = os.environ.get(SETTINGS_ENV)
    if explicit:
        return JsonSettings(explicit)
    default = BASE_DIR / "settings.json"
    return JsonSettings(default if default.exists() else None)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="photo-renamer",
        description="Rename photos by city and capture time.",
        epilog="You can change the content inside photos.txt, or use another file.",
    )
    p.add_argument(
        "filename", help="Text file with one '<name>.<ext>, <City>, <timestamp>' per line"
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = _load_settings()
    init_logging(
        level=str(settings.get("logging.level", DEFAULT_LEVEL)),
        log_dir=settings.get("logging.dir"),
    )

    try:
        input_string = TextPhotoSource().read(args.filename)
    except FileNotFoundError:
        sys.stderr.write(f"Error: File not found - '{args.filename}'\n")
        return 1
    except (OSError, UnicodeDecodeError) as ex:
        logger.warning("Read failed for {}: {}", args.filename, ex)
        sys.stderr.write(f"Error: Could not read '{args.filename}' - {ex}\n")
        return 1

    try:
        result = PhotoRenamer().photo_renamer(input_string)
    except PhotoRenameError as ex:
        logger.warning("Rejected {}: {}", args.filename, ex.describe())
        sys.stderr.write(f"error: {ex}\n")
        return 1

    sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
