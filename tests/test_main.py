"""Command Line Tests

Tests for the hatenablog-members entry point with the client mocked out.
"""

from unittest.mock import MagicMock, patch

import pytest

from hatenablog_members import APIError, BlogMember, ConfigurationError
from hatenablog_members.main import main


@pytest.fixture
def mock_client():
    """Mock client returned by build_client"""
    mock = MagicMock()
    mock.__enter__.return_value = mock
    mock.__exit__.return_value = False
    mock.blog_host = "blog.example.com"
    mock.list_members.return_value = [
        BlogMember(username="alice", role="admin"),
        BlogMember(username="bob", role="editor"),
    ]

    with patch("hatenablog_members.main.build_client", return_value=mock) as build, \
         patch("hatenablog_members.main.load_dotenv"):
        mock.build = build
        yield mock


class TestCommands:
    """Test each subcommand"""

    def test_list(self, mock_client, capsys):
        main(["list"])

        out = capsys.readouterr().out
        assert "alice" in out
        assert "editor" in out
        mock_client.list_members.assert_called_once_with()

    def test_show(self, mock_client, capsys):
        mock_client.get_member.return_value = BlogMember(username="bob", role="editor")

        main(["show", "bob"])

        assert "bob" in capsys.readouterr().out
        mock_client.get_member.assert_called_once_with("bob")

    def test_show_missing(self, mock_client):
        mock_client.get_member.return_value = None

        with pytest.raises(SystemExit) as exc_info:
            main(["show", "carol"])

        assert exc_info.value.code == 1

    def test_add(self, mock_client, capsys):
        mock_client.add_member.return_value = BlogMember(username="carol", role="contributor")

        main(["add", "carol", "--role", "contributor"])

        mock_client.add_member.assert_called_once_with("carol", "contributor")
        assert "carol" in capsys.readouterr().out

    def test_update(self, mock_client):
        mock_client.update_member.return_value = BlogMember(username="bob", role="admin")

        main(["update", "bob", "-r", "admin"])

        mock_client.update_member.assert_called_once_with("bob", "admin")

    def test_delete(self, mock_client, capsys):
        main(["delete", "bob"])

        mock_client.delete_member.assert_called_once_with("bob")
        assert "Deleted bob" in capsys.readouterr().out

    def test_client_closed(self, mock_client):
        main(["list"])

        mock_client.__exit__.assert_called_once()


class TestErrors:
    """Test failure exits"""

    def test_api_error_exits(self, mock_client):
        mock_client.delete_member.side_effect = APIError(404, "not found")

        with pytest.raises(SystemExit) as exc_info:
            main(["delete", "nobody"])

        assert exc_info.value.code == 1

    def test_configuration_error_exits(self, mock_client):
        mock_client.build.side_effect = ConfigurationError("username is required")

        with pytest.raises(SystemExit) as exc_info:
            main(["list"])

        assert exc_info.value.code == 1

    def test_invalid_role_rejected(self, mock_client):
        with pytest.raises(SystemExit) as exc_info:
            main(["add", "carol", "--role", "owner"])

        assert exc_info.value.code == 2
        mock_client.add_member.assert_not_called()

    def test_invalid_log_level_exits(self, mock_client, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "VERBOSE", "list"])

        assert exc_info.value.code == 1
        mock_client.build.assert_not_called()

    def test_no_command_prints_help(self, mock_client, capsys):
        main([])

        assert "usage" in capsys.readouterr().out.lower()
        mock_client.build.assert_not_called()


class TestOptions:
    """Test global options reaching the settings"""

    def test_overrides(self, mock_client, clean_env):
        main([
            "--username", "cli-user",
            "--owner", "team",
            "--blog-host", "cli.example.com",
            "--hatenablog-host", "localhost:8080",
            "--insecure",
            "list",
        ])

        settings = mock_client.build.call_args[0][0]
        assert settings.username == "cli-user"
        assert settings.resolved_owner == "team"
        assert settings.blog_host == "cli.example.com"
        assert settings.hatenablog_host == "localhost:8080"
        assert settings.insecure is True

    def test_environment_used_without_options(self, mock_client, clean_env, monkeypatch):
        monkeypatch.setenv("HATENABLOG_USERNAME", "env-user")
        monkeypatch.setenv("HATENABLOG_INSECURE", "true")

        main(["list"])

        settings = mock_client.build.call_args[0][0]
        assert settings.username == "env-user"
        assert settings.insecure is True

    def test_version_passed(self, mock_client):
        from hatenablog_members import __version__

        main(["list"])

        assert mock_client.build.call_args[0][1] == __version__
