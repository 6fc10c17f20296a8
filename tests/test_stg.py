"""Tests for stgseries.stg package."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from stgseries.stg import (
    GitError,
    NoUpstreamError,
    StgError,
    StgNotInitializedError,
    _run_git_command,
    _run_stg_command,
    configure_runner,
    delete_patch,
    fetch_remote,
    get_patch_id,
    get_repo_root,
    get_series_output,
    get_upstream_branch,
    goto_patch,
    init_stack,
    list_patch_names,
    rebase,
    refresh_patch,
    repair,
    show_commit,
)


def _result(stdout: str) -> MagicMock:
    mock_result = MagicMock()
    mock_result.stdout = stdout
    mock_result.returncode = 0
    return mock_result


class TestRunStgCommand:
    """Tests for _run_stg_command function."""

    def test_successful_command(self, mocker):
        """Test successful stg command execution."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(" + a # one\n"))

        result = _run_stg_command(["series"])

        assert result == " + a # one"
        assert mock_run.call_args[0][0] == ["stg", "series"]

    def test_keeps_leading_whitespace(self, mocker):
        """Test that leading flag columns survive."""
        mocker.patch("subprocess.run", return_value=_result("  a\n"))
        assert _run_stg_command(["series"]) == "  a"

    def test_uses_configured_executable(self, mocker):
        """Test that configure_runner changes the executable."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(""))
        configure_runner("/opt/stg/bin/stg")

        _run_stg_command(["series"])

        assert mock_run.call_args[0][0][0] == "/opt/stg/bin/stg"

    def test_falls_back_to_global_executable(self, mocker):
        """Test that an unconfigured runner asks the global config."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(""))
        mocker.patch("stgseries.stg.runner.get_stg_executable", return_value="stg-dev")
        configure_runner(None)

        _run_stg_command(["series"])

        assert mock_run.call_args[0][0][0] == "stg-dev"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises StgError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(2, "stg", stderr="stg goto: Unknown patch name")
        )

        with pytest.raises(StgError) as exc_info:
            _run_stg_command(["goto", "x"])

        assert "StGit command failed" in str(exc_info.value)
        assert "Unknown patch name" in str(exc_info.value)
        assert not isinstance(exc_info.value, StgNotInitializedError)

    def test_not_initialized_raises_specific_error(self, mocker):
        """Test that an uninitialised branch is detected."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(
                2, "stg", stderr="error: branch `main` not initialized"
            )
        )

        with pytest.raises(StgNotInitializedError):
            _run_stg_command(["series"])

    def test_stg_not_found_raises_error(self, mocker):
        """Test that missing stg raises StgError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(StgError) as exc_info:
            _run_stg_command(["series"])

        assert "not installed" in str(exc_info.value)

    def test_verbose_echoes_command(self, mocker, capsys):
        """Test that verbose mode prints the command to stderr."""
        mocker.patch("subprocess.run", return_value=_result(""))
        configure_runner("stg", verbose=True)

        _run_stg_command(["series", "--all"])

        assert "$ stg series --all" in capsys.readouterr().err


class TestRunGitCommand:
    """Tests for _run_git_command and get_repo_root."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mocker.patch("subprocess.run", return_value=_result("output\n"))
        assert _run_git_command(["status"]) == "output"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="error")
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)

    def test_repo_root(self, mocker):
        """Test that repo root path is returned."""
        mocker.patch("subprocess.run", return_value=_result("/path/to/repo\n"))
        assert get_repo_root() == Path("/path/to/repo")

    def test_repo_root_outside_repo(self, mocker):
        """Test error if not in a git repository."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repo")
        )

        with pytest.raises(GitError) as exc_info:
            get_repo_root()

        assert "Not in a git repository" in str(exc_info.value)


class TestStgCommands:
    """Tests for the stg command wrappers."""

    @pytest.fixture
    def mock_stg(self, mocker):
        return mocker.patch("stgseries.stg.commands._run_stg_command", return_value="")

    def test_series_output(self, mock_stg):
        """Test the series listing arguments."""
        mock_stg.return_value = " > a # one"

        assert get_series_output() == " > a # one"
        mock_stg.assert_called_once_with(["series", "--all", "--description", "--empty"])

    def test_list_patch_names(self, mock_stg):
        """Test that names are split one per line."""
        mock_stg.return_value = "a\nb\n\nc"

        assert list_patch_names() == ["a", "b", "c"]
        mock_stg.assert_called_once_with(["series", "--all", "--noprefix"])

    def test_list_patch_names_empty(self, mock_stg):
        """Test an empty series."""
        assert list_patch_names() == []

    def test_refresh_current(self, mock_stg):
        """Test refreshing the current patch."""
        refresh_patch()
        mock_stg.assert_called_once_with(["refresh"])

    def test_refresh_named_patch(self, mock_stg):
        """Test refreshing a named patch."""
        refresh_patch("docs")
        mock_stg.assert_called_once_with(["refresh", "-p", "docs"])

    def test_repair(self, mock_stg):
        repair()
        mock_stg.assert_called_once_with(["repair"])

    def test_rebase(self, mock_stg):
        rebase("remotes/origin/main")
        mock_stg.assert_called_once_with(["rebase", "remotes/origin/main"])

    def test_delete(self, mock_stg):
        delete_patch("docs")
        mock_stg.assert_called_once_with(["delete", "docs"])

    def test_goto(self, mock_stg):
        goto_patch("docs")
        mock_stg.assert_called_once_with(["goto", "docs"])

    def test_patch_id(self, mock_stg):
        """Test that the id is stripped."""
        mock_stg.return_value = "abc123\n"

        assert get_patch_id("docs") == "abc123"
        mock_stg.assert_called_once_with(["id", "docs"])

    def test_init(self, mock_stg):
        init_stack()
        mock_stg.assert_called_once_with(["init"])


class TestGitHelpers:
    """Tests for git helpers used around stg actions."""

    def test_upstream_branch(self, mocker):
        """Test splitting the upstream into remote and branch."""
        mocker.patch("subprocess.run", return_value=_result("origin/feature/x\n"))
        assert get_upstream_branch() == ("origin", "feature/x")

    def test_no_upstream(self, mocker):
        """Test error when the branch has no upstream."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="no upstream configured")
        )

        with pytest.raises(NoUpstreamError):
            get_upstream_branch()

    def test_local_upstream(self, mocker):
        """Test error when the upstream is a local branch."""
        mocker.patch("subprocess.run", return_value=_result("main\n"))

        with pytest.raises(NoUpstreamError):
            get_upstream_branch()

    def test_fetch_remote(self, mocker):
        mock_run = mocker.patch("subprocess.run", return_value=_result(""))
        fetch_remote("origin")
        assert mock_run.call_args[0][0] == ["git", "fetch", "origin"]

    def test_show_commit(self, mocker):
        mock_run = mocker.patch("subprocess.run", return_value=_result("commit abc\n"))

        assert show_commit("abc") == "commit abc"
        assert mock_run.call_args[0][0] == ["git", "show", "--stat", "-p", "abc"]
