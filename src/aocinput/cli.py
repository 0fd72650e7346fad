"""Command-line entry points for aocinput."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from aocinput.config import ConfigError, dump_example_config, load_config
from aocinput.errors import AocInputError, FetchFailures
from aocinput.io.cache import is_cached
from aocinput.io.scanner import scan_days
from aocinput.pipeline import sync_inputs
from aocinput.util.logging import configure_logging
from aocinput.util.paths import cache_dir_for, project_root, source_dir_for
from aocinput.util.signals import BuildSignals

app = typer.Typer(add_completion=False, help="Download puzzle inputs for the days a project has started.")


def _load(config_path: Optional[Path], overrides: Optional[dict[str, object]] = None):
    try:
        return load_config(config_path, overrides=overrides)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def fetch(
    root: Path = typer.Argument(Path("."), help="Project root containing the source and input directories"),
    token: str = typer.Option(..., "--token", "-t", envvar="AOC_TOKEN", help="Session cookie value"),
    year: int = typer.Option(..., "--year", "-y", envvar="AOC_YEAR", help="Event year"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
    keep_going: bool = typer.Option(False, "--keep-going", help="Attempt every day and report all failures"),
    user_agent: Optional[str] = typer.Option(
        None,
        "--user-agent",
        envvar="AOC_USER_AGENT",
        help="User-Agent to send; include a contact (URL or email) so the site operator can reach you",
    ),
    log_file: Optional[Path] = typer.Option(None, help="Also write logs to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log cache hits and other debug detail"),
) -> None:
    """Fetch every missing input and emit rerun directives for the build tool."""

    overrides: dict[str, object] = {}
    if keep_going:
        overrides["runtime.fail_fast"] = False
    if user_agent:
        overrides["remote.user_agent"] = user_agent
    cfg = _load(config_path, overrides or None)
    logger = configure_logging(
        log_path=log_file or cfg.runtime.log_path,
        level=logging.DEBUG if verbose else logging.INFO,
    )
    signals = BuildSignals(prefix=cfg.runtime.directive_prefix)

    try:
        report = sync_inputs(root, token, year, config=cfg, signals=signals)
    except FetchFailures as exc:
        for err in exc.errors:
            signals.error(str(err))
        raise typer.Exit(code=1) from exc
    except AocInputError as exc:
        logger.error("%s: %s", exc.kind, exc)
        signals.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.info("Fetched %d new input(s), %d already cached", len(report.fetched), len(report.cached))


@app.command()
def days(
    root: Path = typer.Argument(Path("."), help="Project root"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
) -> None:
    """List the day numbers found in the source directory and their cache state."""

    cfg = _load(config_path)
    layout = cfg.layout
    base = project_root(root)
    cache_dir = cache_dir_for(base, layout)
    try:
        found = scan_days(source_dir_for(base, layout), prefix=layout.day_prefix, extension=layout.source_extension)
    except AocInputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    for day in found:
        state = "cached" if is_cached(day, cache_dir=cache_dir, prefix=layout.day_prefix, extension=layout.cache_extension) else "missing"
        typer.echo(f"{day:02d}\t{state}")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination .yaml or .json file")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["app", "main"]
