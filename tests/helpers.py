from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

import requests

YEAR = 2023
AFTER_EVENT = datetime(2024, 1, 15, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class FakeSession:
    """Stands in for requests.Session: answers by URL and records every call."""

    def __init__(self, responses: dict[int, FakeResponse | Exception] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, dict]] = []

    @property
    def requested_days(self) -> list[int]:
        return [int(url.rstrip("/").split("/")[-2]) for url, _ in self.calls]

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.calls.append((url, kwargs))
        day = int(url.rstrip("/").split("/")[-2])
        outcome = self.responses.get(day, FakeResponse(b"", status_code=404))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Name or service not known")


def make_project(root: Path, names: Iterable[str], *, source_dir: str = "src") -> Path:
    """Create empty files under root/source_dir and return root."""

    src = root / source_dir
    src.mkdir(parents=True, exist_ok=True)
    for name in names:
        (src / name).write_text("// solution\n", encoding="utf-8")
    return root
