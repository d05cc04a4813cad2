"""Plain-text source for photo batches."""

from __future__ import annotations

from pathlib import Path

from loguru import logger


class TextPhotoSource:
    """Load the raw text of a photo batch file."""

    def read(self, path: str) -> str:
        """Return the full contents of `path`.

        Raises:
            FileNotFoundError: if `path` does not exist or is not a file.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(path)
        text = file_path.read_text(encoding="utf-8")
        logger.debug("Read {} characters from {}", len(text), file_path)
        return text
