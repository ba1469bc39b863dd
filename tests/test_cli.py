"""Tests for the CLI."""

from typer.testing import CliRunner

from privateroom import __version__
from privateroom.cli.main import app

runner = CliRunner()


class TestCli:
    """Test commands that do not start the bot."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_config_masks_token(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"telegram": {"token": "123456789:SECRET"}}')

        result = runner.invoke(app, ["config", "--config", str(path)])

        assert result.exit_code == 0
        assert "SECRET" not in result.stdout
        assert "1234" in result.stdout

    def test_run_without_token_fails(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PRIVATEROOM_TELEGRAM__TOKEN", raising=False)
        result = runner.invoke(app, ["run", "--config", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "No Telegram token" in result.stdout
