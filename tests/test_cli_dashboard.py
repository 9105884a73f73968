"""
Tests for the issueboard dashboard CLI command.

The dashboard command provides:
- Server launch with optional browser opening
- Host and port options
- Clear failure when the remote is not configured
"""

from unittest.mock import patch

from typer.testing import CliRunner

from issueboard.cli import app

runner = CliRunner()


class TestDashboardCommandHelp:
    """Test dashboard command help and structure."""

    def test_dashboard_help(self) -> None:
        result = runner.invoke(app, ["dashboard", "--help"])
        assert result.exit_code == 0
        assert "port" in result.output.lower()
        assert "browser" in result.output.lower()


class TestDashboardNoConfig:
    """Test dashboard command without a remote configuration."""

    def test_missing_env(self) -> None:
        with runner.isolated_filesystem():
            with patch("issueboard.cli.dashboard.uvicorn.run") as mock_run:
                result = runner.invoke(app, ["dashboard", "--no-browser"])

        assert result.exit_code == 1
        assert "SUPABASE_URL" in result.output
        mock_run.assert_not_called()

    def test_env_file_is_read(self) -> None:
        with runner.isolated_filesystem():
            with open(".env", "w") as f:
                f.write("SUPABASE_URL=https://file.supabase.co\nSUPABASE_ANON_KEY=file-key\n")
            with patch("issueboard.cli.dashboard.uvicorn.run") as mock_run:
                result = runner.invoke(app, ["dashboard", "--no-browser"])

        assert result.exit_code == 0
        mock_run.assert_called_once()


class TestDashboardLaunch:
    """Test server startup."""

    def test_default_host_and_port(self, remote_env) -> None:
        with runner.isolated_filesystem():
            with patch("issueboard.cli.dashboard.uvicorn.run") as mock_run:
                result = runner.invoke(app, ["dashboard", "--no-browser"])

        assert result.exit_code == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8080
        assert "http://localhost:8080" in result.output

    def test_custom_port(self, remote_env) -> None:
        with runner.isolated_filesystem():
            with patch("issueboard.cli.dashboard.uvicorn.run") as mock_run:
                result = runner.invoke(app, ["dashboard", "--no-browser", "--port", "3000"])

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["port"] == 3000

    def test_app_uses_configured_locale(self, remote_env, monkeypatch) -> None:
        monkeypatch.setenv("ISSUEBOARD_LOCALE", "en")
        with runner.isolated_filesystem():
            with patch("issueboard.cli.dashboard.uvicorn.run") as mock_run:
                runner.invoke(app, ["dashboard", "--no-browser"])

        fastapi_app = mock_run.call_args.args[0]
        assert fastapi_app.state.labels.locale == "en"

    def test_browser_opened(self, remote_env) -> None:
        with runner.isolated_filesystem():
            with (
                patch("issueboard.cli.dashboard.uvicorn.run"),
                patch("issueboard.cli.dashboard.threading.Thread") as mock_thread,
            ):
                result = runner.invoke(app, ["dashboard"])

        assert result.exit_code == 0
        mock_thread.assert_called_once()
        mock_thread.return_value.start.assert_called_once()

    def test_no_browser(self, remote_env) -> None:
        with runner.isolated_filesystem():
            with (
                patch("issueboard.cli.dashboard.uvicorn.run"),
                patch("issueboard.cli.dashboard.threading.Thread") as mock_thread,
            ):
                runner.invoke(app, ["dashboard", "--no-browser"])

        mock_thread.assert_not_called()

    def test_ctrl_c_exits_cleanly(self, remote_env) -> None:
        with runner.isolated_filesystem():
            with patch("issueboard.cli.dashboard.uvicorn.run", side_effect=KeyboardInterrupt):
                result = runner.invoke(app, ["dashboard", "--no-browser"])

        assert result.exit_code == 0
        assert "stopped" in result.output.lower()
