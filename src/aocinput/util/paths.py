"""Path utilities centralising project layout decisions."""

from __future__ import annotations

from pathlib import Path

from aocinput.config.models import LayoutConfig


def project_root(root: str | Path) -> Path:
    """Return the resolved project root."""
    return Path(root).expanduser().resolve()


def source_dir_for(root: Path, layout: LayoutConfig) -> Path:
    return root / layout.source_dir


def cache_dir_for(root: Path, layout: LayoutConfig) -> Path:
    return root / layout.cache_dir


__all__ = ["cache_dir_for", "project_root", "source_dir_for"]
