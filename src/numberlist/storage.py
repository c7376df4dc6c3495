"""Plain-text persistence of a number in decimal notation."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def read_decimal(path: str | os.PathLike[str] | None) -> str:
    """
    Return the trimmed content of a file, with line breaks removed.

    A missing or unreadable file yields an empty string.
    """
    if path is None:
        return ""
    file = Path(path)
    if not file.is_file():
        logger.debug("No number file at %s", file)
        return ""
    try:
        with file.open(encoding="utf-8") as handle:
            return "".join(line.rstrip("\r\n") for line in handle).strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read number file %s: %s", file, exc)
        return ""


def write_decimal(path: str | os.PathLike[str] | None, text: str) -> None:
    """Write text to a file, creating parent directories. Failures are logged and ignored."""
    if path is None:
        return
    file = Path(path)
    try:
        file.parent.mkdir(parents=True, exist_ok=True)
        with file.open("w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        logger.warning("Could not write number file %s: %s", file, exc)
