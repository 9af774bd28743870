"""
Pytest configuration and fixtures for effectgraph.

- Constant producers and recording continuations for wiring nodes by hand.
- A fake host effect runtime.
- A runner for invoking the CLI.
"""

from types import SimpleNamespace
from typing import Any, Callable, List

import pytest


class BranchRecorder:
    """Continuations that record which branch a push node took."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def branch(self, name: str) -> Callable[[], None]:
        return lambda: self.calls.append(name)


@pytest.fixture
def const() -> Callable[[Any], Callable[[], Any]]:
    """Returns a factory for zero-argument producers yielding a fixed value."""
    def _const(value: Any) -> Callable[[], Any]:
        return lambda: value
    return _const


@pytest.fixture
def recorder() -> BranchRecorder:
    return BranchRecorder()


@pytest.fixture
def host() -> SimpleNamespace:
    return SimpleNamespace(amaz=object())


@pytest.fixture
def cli_runner() -> "CliRunner":
    from typer.testing import CliRunner
    return CliRunner()


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("EFFECTGRAPH_LOG_LEVEL", "EFFECTGRAPH_RICH_TRACEBACKS"):
        monkeypatch.delenv(key, raising=False)


def pytest_configure(config):
    # Warnings raised from the package fail the run
    config.addinivalue_line("filterwarnings", "error:::effectgraph")
