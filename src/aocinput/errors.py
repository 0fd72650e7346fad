"""Error taxonomy for input downloads."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Sequence


class AocInputError(RuntimeError):
    """Base class for every failure raised while syncing inputs."""

    fatal: bool = True

    def __init__(self, message: str, *, day: int | None = None, year: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.day = day
        self.year = year

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        context = []
        if self.year is not None:
            context.append(f"year {self.year}")
        if self.day is not None:
            context.append(f"day {self.day:02d}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class TransientNetworkError(AocInputError):
    """The request never produced a response (DNS, connect, timeout)."""

    def __init__(self, url: str, cause: Exception, *, day: int | None = None, year: int | None = None) -> None:
        super().__init__(f"HTTP error: '{cause}' when fetching '{url}'", day=day, year=year)
        self.url = url


class RemoteRejectedError(AocInputError):
    """The remote answered with a non-2xx status."""

    def __init__(
        self,
        url: str,
        status_code: int,
        body: str = "",
        *,
        day: int | None = None,
        year: int | None = None,
    ) -> None:
        detail = body.strip()
        message = f"remote rejected '{url}' with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, day=day, year=year)
        self.url = url
        self.status_code = status_code
        self.body = body


class FilesystemError(AocInputError):
    """Creating, listing or writing a path failed."""

    def __init__(self, path: Path, cause: OSError, *, day: int | None = None, year: int | None = None) -> None:
        super().__init__(f"IO error: '{cause}' when accessing '{path}'", day=day, year=year)
        self.path = path


class InvalidTokenError(AocInputError):
    """The session token cannot be sent as a cookie value."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"session token is unusable: {reason}")


class InvalidYearError(AocInputError):
    """Puzzles do not exist for the requested year."""

    def __init__(self, year: int, latest: int) -> None:
        super().__init__(f"no puzzles exist; valid years are 2015 to {latest}", year=year)
        self.latest = latest


class NotReleasedError(AocInputError):
    """The day's input unlocks in the future."""

    fatal = False

    def __init__(self, release: datetime, *, day: int, year: int) -> None:
        super().__init__(
            f"input is not available before {release.astimezone():%Y-%m-%d %H:%M %Z}",
            day=day,
            year=year,
        )
        self.release = release


class FetchFailures(AocInputError):
    """Aggregate of the fatal errors collected in keep-going mode."""

    def __init__(self, errors: Sequence[AocInputError], *, year: int | None = None) -> None:
        days = ", ".join(f"{err.day:02d}" for err in errors if err.day is not None)
        super().__init__(f"{len(errors)} day(s) failed: {days}", year=year)
        self.errors = list(errors)


__all__ = [
    "AocInputError",
    "FetchFailures",
    "FilesystemError",
    "InvalidTokenError",
    "InvalidYearError",
    "NotReleasedError",
    "RemoteRejectedError",
    "TransientNetworkError",
]
