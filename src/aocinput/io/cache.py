"""Local cache helpers for downloaded inputs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from aocinput.errors import FilesystemError

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".download"


def cache_path_for(day: int, *, cache_dir: Path, prefix: str = "day", extension: str = ".txt") -> Path:
    """Return the path where the input for `day` is stored, e.g. ``input/day07.txt``."""
    return cache_dir / f"{prefix}{day:02d}{extension}"


def is_cached(day: int, *, cache_dir: Path, prefix: str = "day", extension: str = ".txt") -> bool:
    """Presence alone counts as a cache hit; content is never inspected."""
    return cache_path_for(day, cache_dir=cache_dir, prefix=prefix, extension=extension).exists()


def write_artifact(
    day: int,
    body: bytes,
    *,
    cache_dir: Path,
    prefix: str = "day",
    extension: str = ".txt",
) -> Path:
    """Persist `body` as the cached input for `day` and return its path.

    The body goes to a temporary sibling first and is renamed into place, so a
    failed write never leaves a file that would later look like a cache hit.
    An existing cache file is never replaced.
    """
    dest = cache_path_for(day, cache_dir=cache_dir, prefix=prefix, extension=extension)
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(cache_dir, exc, day=day) from exc

    if dest.exists():
        raise FilesystemError(dest, FileExistsError(f"refusing to overwrite {dest.name}"), day=day)

    tmp_path = dest.with_suffix(dest.suffix + TEMP_SUFFIX)
    try:
        with tmp_path.open("wb") as handle:
            handle.write(body)
            handle.flush()
            os.fsync(handle.fileno())
        tmp_path.replace(dest)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise FilesystemError(dest, exc, day=day) from exc

    logger.info("Wrote %s (%d bytes)", dest, len(body))
    return dest


__all__ = ["TEMP_SUFFIX", "cache_path_for", "is_cached", "write_artifact"]
