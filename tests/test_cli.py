"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from habit_forge.cli import main
from habit_forge.config import Config


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "DATA_DIR", tmp_path / "data")
    return CliRunner()


def register(runner):
    return runner.invoke(
        main,
        ["account", "register", "--name", "runner01",
         "--email", "runner@example.com", "--password", "secret"],
    )


class TestAccountCommands:
    """Tests for the account command group."""

    def test_requires_init(self, runner):
        result = runner.invoke(main, ["account", "status"])
        assert result.exit_code == 1
        assert "not initialized" in result.output

    def test_register_topup_status(self, runner):
        assert runner.invoke(main, ["init"]).exit_code == 0

        result = register(runner)
        assert result.exit_code == 0
        assert "Registered as runner01" in result.output

        result = runner.invoke(main, ["account", "topup", "750"])
        assert "now 750" in result.output

        # A fresh command reads the stored snapshot back
        result = runner.invoke(main, ["account", "status"])
        assert result.exit_code == 0
        assert "runner01" in result.output
        assert "750" in result.output

    def test_invalid_registration(self, runner):
        runner.invoke(main, ["init"])
        result = runner.invoke(
            main,
            ["account", "register", "--name", "abc",
             "--email", "runner@example.com", "--password", "secret"],
        )
        assert result.exit_code == 1
        assert "at least 5 characters" in result.output

    def test_logout_then_status(self, runner):
        runner.invoke(main, ["init"])
        register(runner)

        assert "Signed out" in runner.invoke(main, ["account", "logout"]).output
        result = runner.invoke(main, ["account", "status"])
        assert result.exit_code == 1
        assert "Not signed in" in result.output

    def test_login_with_email(self, runner):
        runner.invoke(main, ["init"])
        register(runner)

        result = runner.invoke(
            main, ["account", "login", "Runner@Example.com", "--password", "secret"]
        )
        assert result.exit_code == 0
        assert "Signed in as runner01" in result.output

    def test_logout_forgets_stored_account(self, runner):
        runner.invoke(main, ["init"])
        register(runner)
        runner.invoke(main, ["account", "logout"])

        result = runner.invoke(main, ["account", "login", "runner01", "--password", "secret"])
        assert result.exit_code == 1
        assert "Register first." in result.output
