"""Tests for the command line entry point."""

from unittest.mock import MagicMock, patch

import pytest
from urllib3.exceptions import MaxRetryError

from oc_projects.__main__ import main, parse_args
from oc_projects.domains.projects.models import SessionConfig
from oc_projects.utils.errors import EnumerationError, ProjectForbiddenError


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.short is False
        assert args.args == []

    @pytest.mark.parametrize("flag", ["-q", "--short"])
    def test_short_flag(self, flag: str) -> None:
        assert parse_args([flag]).short is True

    def test_collects_positional_args(self) -> None:
        assert parse_args(["dev", "-q"]).args == ["dev"]


class TestMain:
    """Test main()."""

    def test_positional_args_rejected_before_any_io(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("oc_projects.domains.projects.command.load_session_config") as load, patch(
            "oc_projects.domains.projects.command.K8sClient"
        ) as k8s_cls:
            assert main(["dev"]) == 1
            load.assert_not_called()
            k8s_cls.assert_not_called()

        assert "error: no arguments should be passed" in capsys.readouterr().err

    def test_success(self) -> None:
        with patch("oc_projects.domains.projects.command.ProjectsCommand.run") as run:
            assert main(["-q"]) == 0
            run.assert_called_once_with(short=True)

    def test_flags_reach_config(self) -> None:
        with patch("oc_projects.domains.projects.command.ProjectsCommand") as command_cls:
            command_cls.return_value = MagicMock()
            main(["--kubeconfig", "/tmp/kc", "--context", "work"])

        config = command_cls.call_args.args[0]
        assert str(config.kubeconfig_path) == "/tmp/kc"
        assert config.kubeconfig_context == "work"

    def test_unreachable_server_exits_nonzero(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        session = SessionConfig()
        mock_client = MagicMock()
        mock_client.list_projects.side_effect = MaxRetryError(
            None, "/apis", "connection refused"
        )

        with patch(
            "oc_projects.domains.projects.command.load_session_config", return_value=session
        ), patch("oc_projects.domains.projects.command.K8sClient", return_value=mock_client):
            assert main([]) == 1

        assert "error: Failed to list projects" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "error",
        [EnumerationError("Failed to list projects"), ProjectForbiddenError("secret")],
    )
    def test_errors_exit_nonzero(
        self, error: Exception, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            "oc_projects.domains.projects.command.ProjectsCommand.run", side_effect=error
        ):
            assert main([]) == 1

        assert f"error: {error}" in capsys.readouterr().err
