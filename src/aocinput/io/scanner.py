"""Discovery of day files in a project's source directory."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from aocinput.errors import FilesystemError

logger = logging.getLogger(__name__)


def day_pattern(prefix: str = "day", extension: str = ".rs") -> re.Pattern[str]:
    """Return the regex a day filename must fully match, e.g. ``day07.rs``."""
    return re.compile(rf"{re.escape(prefix)}(\d{{2}}){re.escape(extension)}")


def parse_day(name: str, *, prefix: str = "day", extension: str = ".rs") -> int | None:
    """Return the day number encoded in `name`, or None when it does not match."""
    match = day_pattern(prefix, extension).fullmatch(name)
    if match is None:
        return None
    return int(match.group(1))


def scan_days(source_dir: Path, *, prefix: str = "day", extension: str = ".rs") -> list[int]:
    """List the distinct day numbers referenced by files directly in `source_dir`.

    A missing directory yields no days. Subdirectories are not descended into
    and names that do not match ``<prefix>NN<extension>`` are ignored.
    """
    if not source_dir.exists():
        logger.debug("Source directory %s does not exist; no days to fetch", source_dir)
        return []

    days: set[int] = set()
    try:
        for entry in source_dir.iterdir():
            day = parse_day(entry.name, prefix=prefix, extension=extension)
            if day is not None and entry.is_file():
                days.add(day)
    except OSError as exc:
        raise FilesystemError(source_dir, exc) from exc

    return sorted(days)


__all__ = ["day_pattern", "parse_day", "scan_days"]
