"""Tests for projdash.cli — argument handling and server startup."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from projdash.app import Dashboard
from projdash.cli import main
from projdash.config import DashboardConfig


class TestProjdashCli:
    @patch("projdash.server.dev.run_server")
    def test_defaults(self, mock_server: MagicMock, projects_root: Path) -> None:
        main([str(projects_root)])
        mock_server.assert_called_once()
        args = mock_server.call_args.args
        app = args[0]
        assert isinstance(app, Dashboard)
        assert app.config.root == projects_root
        assert app.config.scheme == "index"
        assert args[1] == "127.0.0.1"
        assert args[2] == 8000

    @patch("projdash.server.dev.run_server")
    def test_overrides(self, mock_server: MagicMock, projects_root: Path) -> None:
        main(
            [
                str(projects_root),
                "--host",
                "0.0.0.0",
                "--port",
                "9000",
                "--scheme",
                "both",
                "--dir-listing",
                "--debug",
            ]
        )
        args = mock_server.call_args.args
        app = args[0]
        assert args[1] == "0.0.0.0"
        assert args[2] == 9000
        assert app.config.scheme == "both"
        assert app.config.show_dir_listing is True
        assert app.config.debug is True

    @patch("projdash.server.dev.run_server")
    def test_app_is_frozen_but_not_scanned(self, mock_server: MagicMock, projects_root: Path) -> None:
        main([str(projects_root)])
        app = mock_server.call_args[0][0]
        assert app._frozen is True
        assert app.catalog.is_built is False

    def test_missing_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "is not a directory" in capsys.readouterr().err

    def test_invalid_port(self, projects_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(projects_root), "--port", "70000"])
        assert exc_info.value.code == 1
        assert "out of range" in capsys.readouterr().err

    def test_unknown_scheme_rejected_by_parser(self, projects_root: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(projects_root), "--scheme", "hash"])
        assert exc_info.value.code == 2

    @patch("projdash.server.dev.run_server")
    def test_port_zero_on_command_line(self, mock_server: MagicMock, projects_root: Path) -> None:
        main([str(projects_root), "--port", "0"])
        assert mock_server.call_args.args[2] == 0


class TestDashboardRun:
    @patch("projdash.server.dev.run_server")
    def test_explicit_arguments_win(self, mock_server: MagicMock, projects_root: Path) -> None:
        app = Dashboard(DashboardConfig(root=projects_root, host="10.0.0.1", port=9000))
        app.run(host="127.0.0.1", port=0)
        assert mock_server.call_args.args[1:] == ("127.0.0.1", 0)

    @patch("projdash.server.dev.run_server")
    def test_defaults_from_config(self, mock_server: MagicMock, projects_root: Path) -> None:
        app = Dashboard(DashboardConfig(root=projects_root, host="10.0.0.1", port=9000))
        app.run()
        assert mock_server.call_args.args[1:] == ("10.0.0.1", 9000)
        assert mock_server.call_args.kwargs == {}
