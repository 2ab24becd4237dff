"""Shared pytest fixtures and test helpers for rosterctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from rosterctl.services.telemetry import _current_span, disable_telemetry

HEADER = "ID;Name;Gender;BirthDate;Department;Salary"

SAMPLE_ROWS = [
    '1;"Smith; J.";m;01.01.1990;"R&D ""West""";1000',
    "2;Anna Petrova;ж;15.06.1985;Sales;2500,50",
    "3;Bob Stone;Male;31.12.1979; sales ;1200.75",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_roster(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing roster lines to a UTF-8 file under tmp_path."""

    def _write(lines: list[str], name: str = "roster.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_roster(write_roster: Callable[..., Path]) -> Path:
    """Header plus three rows in two departments."""
    return write_roster([HEADER, *SAMPLE_ROWS])


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from tmp_path with no config file or config env vars leaking in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROSTERCTL_CONFIG", raising=False)
    monkeypatch.delenv("ROSTERCTL_INPUT__DEFAULT_FILE", raising=False)
    monkeypatch.delenv("ROSTERCTL_REPORT__SHOW_PEOPLE", raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("rosterctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("rosterctl").setLevel(pkg_level)
    disable_telemetry()
    _current_span.set(None)
