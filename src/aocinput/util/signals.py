"""Directives written to the host build tool."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO


class BuildSignals:
    """Write ``<prefix><key>=<value>`` lines to the build tool's channel.

    With the default prefix the lines read ``cargo::rerun-if-changed=src``.
    """

    def __init__(self, stream: TextIO | None = None, *, prefix: str = "cargo::") -> None:
        self._stream = stream
        self.prefix = prefix

    @property
    def stream(self) -> TextIO:
        # resolved lazily so redirected/captured stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, key: str, value: str) -> None:
        flat = " ".join(str(value).split())
        print(f"{self.prefix}{key}={flat}", file=self.stream, flush=True)

    def rerun_if_changed(self, path: str | Path) -> None:
        self.emit("rerun-if-changed", str(path))

    def warning(self, message: str) -> None:
        self.emit("warning", message)

    def error(self, message: str) -> None:
        self.emit("error", message)


__all__ = ["BuildSignals"]
