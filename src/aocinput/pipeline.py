"""Scan, check the cache, fetch and write: the per-invocation input sync."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from aocinput.config.models import AocInputConfig
from aocinput.errors import AocInputError, FetchFailures
from aocinput.io.cache import is_cached, write_artifact
from aocinput.io.fetcher import FetchRequest, HttpSession, fetch_input
from aocinput.io.scanner import scan_days
from aocinput.services.calendar import day_in_range, ensure_released, max_day_for, validate_year
from aocinput.util.paths import cache_dir_for, project_root, source_dir_for
from aocinput.util.signals import BuildSignals

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Outcome of one sync, by day number."""

    year: int
    fetched: list[int] = field(default_factory=list)
    cached: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    failures: list[AocInputError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def sync_inputs(
    root: str | Path,
    token: str,
    year: int,
    *,
    config: AocInputConfig | None = None,
    session: HttpSession | None = None,
    signals: BuildSignals | None = None,
    now: datetime | None = None,
) -> SyncReport:
    """Download every missing input for the days found under ``<root>/<source_dir>``.

    Days already present in ``<root>/<cache_dir>`` are left alone. The first
    fatal error aborts the run unless ``runtime.fail_fast`` is off, in which
    case all days are attempted and a :class:`FetchFailures` is raised at the
    end. The rerun-if-changed directives are emitted on every exit path.
    """
    config = config or AocInputConfig()
    layout = config.layout
    runtime = config.runtime
    signals = signals or BuildSignals(prefix=runtime.directive_prefix)
    now = now or datetime.now(timezone.utc)

    base = project_root(root)
    source_dir = source_dir_for(base, layout)
    cache_dir = cache_dir_for(base, layout)
    report = SyncReport(year=year)

    try:
        validate_year(year, now=now)
        days = scan_days(source_dir, prefix=layout.day_prefix, extension=layout.source_extension)
        logger.info("Found %d day(s) under %s", len(days), source_dir)

        for day in days:
            if not day_in_range(year, day):
                message = f"Detected a day with number '{day}' out of valid range 1-{max_day_for(year)}, skipping"
                logger.warning(message)
                signals.warning(message)
                report.skipped.append(day)
                continue

            if is_cached(day, cache_dir=cache_dir, prefix=layout.day_prefix, extension=layout.cache_extension):
                logger.debug("Cache hit for day %02d", day)
                report.cached.append(day)
                continue

            try:
                _sync_day(day, token, year, config=config, cache_dir=cache_dir, session=session, now=now)
            except AocInputError as exc:
                if not exc.fatal:
                    logger.warning("Skipping day %02d: %s", day, exc)
                    signals.warning(str(exc))
                    report.skipped.append(day)
                    continue
                if runtime.fail_fast:
                    raise
                logger.error("Day %02d failed: %s", day, exc)
                report.failures.append(exc)
                continue
            report.fetched.append(day)
    finally:
        signals.rerun_if_changed(layout.source_dir)
        signals.rerun_if_changed(layout.cache_dir)

    logger.info(
        "Sync for %s finished: fetched=%s cached=%s skipped=%s failed=%d",
        year,
        report.fetched,
        report.cached,
        report.skipped,
        len(report.failures),
    )
    if report.failures:
        raise FetchFailures(report.failures, year=year)
    return report


def _sync_day(
    day: int,
    token: str,
    year: int,
    *,
    config: AocInputConfig,
    cache_dir: Path,
    session: HttpSession | None,
    now: datetime,
) -> Path:
    ensure_released(
        year,
        day,
        now=now,
        timezone=config.runtime.release_timezone,
        hour=config.runtime.release_hour,
    )
    request = FetchRequest(year=year, day=day, token=token)
    body = fetch_input(request, remote=config.remote, session=session)
    return write_artifact(
        day,
        body,
        cache_dir=cache_dir,
        prefix=config.layout.day_prefix,
        extension=config.layout.cache_extension,
    )


def download_inputs(
    root: str | Path,
    token: str,
    year: int,
    *,
    config: AocInputConfig | None = None,
    session: HttpSession | None = None,
    signals: BuildSignals | None = None,
    now: datetime | None = None,
) -> None:
    """Build-step entry point: fetch missing inputs or raise on the first hard failure."""
    sync_inputs(root, token, year, config=config, session=session, signals=signals, now=now)


__all__ = ["SyncReport", "download_inputs", "sync_inputs"]
