"""Unit tests for the click entry point."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from starsky import __version__
from starsky.__main__ import cli
from starsky.app import StarskyApp

pytestmark = pytest.mark.unit


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCli:
    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert result.output.strip() == f"starsky {__version__}"

    def test_runs_app_with_seed(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        seen: dict[str, object] = {}

        def fake_run(self: StarskyApp, *args: object, **kwargs: object) -> None:
            seen["seed"] = self.config.seed

        monkeypatch.setattr(StarskyApp, "run", fake_run)

        result = runner.invoke(cli, ["--seed", "42"])

        assert result.exit_code == 0
        assert seen["seed"] == 42

    def test_startup_failure_exits_nonzero(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ):
        def broken_run(self: StarskyApp, *args: object, **kwargs: object) -> None:
            raise RuntimeError("not a terminal")

        monkeypatch.setattr(StarskyApp, "run", broken_run)

        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "Error running program: not a terminal" in result.output

    def test_rejects_positional_arguments(self, runner: CliRunner):
        result = runner.invoke(cli, ["extra"])
        assert result.exit_code != 0
