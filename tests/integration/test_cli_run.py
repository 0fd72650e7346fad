from __future__ import annotations

import logging

from typer.testing import CliRunner

from aocinput import cli
from tests.helpers import FakeResponse, make_project

runner = CliRunner()


def _patch_requests(monkeypatch, responses: dict[int, FakeResponse]) -> list[str]:
    requested: list[str] = []

    def fake_get(url: str, **kwargs) -> FakeResponse:
        requested.append(url)
        day = int(url.split("/")[-2])
        return responses.get(day, FakeResponse(b"Not Found", status_code=404))

    monkeypatch.setattr("aocinput.io.fetcher.requests.get", fake_get)
    return requested


def test_cli_fetch_downloads_and_prints_directives(monkeypatch, tmp_path) -> None:
    make_project(tmp_path, ["day01.rs", "day02.rs"])
    requested = _patch_requests(monkeypatch, {1: FakeResponse(b"123\n"), 2: FakeResponse(b"456\n")})
    monkeypatch.setenv("AOC_TOKEN", "tok")

    result = runner.invoke(cli.app, ["fetch", str(tmp_path), "--year", "2022"])

    assert result.exit_code == 0, result.output
    assert len(requested) == 2
    assert (tmp_path / "input" / "day02.txt").read_text(encoding="utf-8") == "456\n"
    assert "cargo::rerun-if-changed=src" in result.stdout
    assert "cargo::rerun-if-changed=input" in result.stdout


def test_cli_fetch_reports_rejection(monkeypatch, tmp_path) -> None:
    make_project(tmp_path, ["day01.rs", "day02.rs"])
    _patch_requests(monkeypatch, {1: FakeResponse(b"123\n")})

    result = runner.invoke(cli.app, ["fetch", str(tmp_path), "--year", "2022", "--token", "tok"])

    assert result.exit_code == 1
    assert (tmp_path / "input" / "day01.txt").read_text(encoding="utf-8") == "123\n"
    assert not (tmp_path / "input" / "day02.txt").exists()
    error_lines = [line for line in result.stdout.splitlines() if line.startswith("cargo::error=")]
    assert len(error_lines) == 1
    assert "404" in error_lines[0]
    assert "day 02" in error_lines[0]


def test_cli_keep_going_reports_every_failure(monkeypatch, tmp_path) -> None:
    make_project(tmp_path, ["day01.rs", "day02.rs", "day03.rs"])
    _patch_requests(monkeypatch, {2: FakeResponse(b"ok")})

    result = runner.invoke(cli.app, ["fetch", str(tmp_path), "-y", "2022", "-t", "tok", "--keep-going"])

    assert result.exit_code == 1
    assert (tmp_path / "input" / "day02.txt").exists()
    error_lines = [line for line in result.stdout.splitlines() if line.startswith("cargo::error=")]
    assert len(error_lines) == 2


def test_cli_days_lists_cache_state(tmp_path) -> None:
    make_project(tmp_path, ["day01.rs", "day03.rs", "day3.rs"])
    (tmp_path / "input").mkdir()
    (tmp_path / "input" / "day03.txt").write_text("x", encoding="utf-8")

    result = runner.invoke(cli.app, ["days", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["01\tmissing", "03\tcached"]


def test_cli_dump_config(tmp_path) -> None:
    dest = tmp_path / "aocinput.yaml"
    result = runner.invoke(cli.app, ["dump-config", str(dest)])

    assert result.exit_code == 0, result.output
    assert "layout:" in dest.read_text(encoding="utf-8")

    rejected = runner.invoke(cli.app, ["dump-config", str(tmp_path / "aocinput.toml")])
    assert rejected.exit_code == 2


def test_cli_verbose_and_user_agent(monkeypatch, tmp_path) -> None:
    make_project(tmp_path, ["day01.rs"])
    sent_headers: list[dict] = []
    levels: list[int] = []

    def fake_get(url: str, **kwargs) -> FakeResponse:
        sent_headers.append(kwargs["headers"])
        return FakeResponse(b"123\n")

    def fake_configure_logging(*, log_path=None, level=logging.INFO) -> logging.Logger:
        levels.append(level)
        return logging.getLogger("aocinput")

    monkeypatch.setattr("aocinput.io.fetcher.requests.get", fake_get)
    monkeypatch.setattr(cli, "configure_logging", fake_configure_logging)

    result = runner.invoke(
        cli.app,
        ["fetch", str(tmp_path), "-y", "2022", "-t", "tok", "--verbose", "--user-agent", "me@example.com"],
    )

    assert result.exit_code == 0, result.output
    assert levels == [logging.DEBUG]
    assert sent_headers[0]["User-Agent"] == "me@example.com"

    (tmp_path / "input" / "day01.txt").unlink()
    result = runner.invoke(cli.app, ["fetch", str(tmp_path), "-y", "2022", "-t", "tok"])

    assert result.exit_code == 0, result.output
    assert levels == [logging.DEBUG, logging.INFO]
