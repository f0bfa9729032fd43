"""Unit tests for running result actions"""

from unittest.mock import patch
import subprocess
import sys
import os

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flint.core import process_launcher
from flint.core.search_models import (
    AppEntry,
    AppSearchResult,
    CalculationSearchResult,
    CommandSearchResult,
    CurrencySearchResult,
    EmojiSearchResult,
    FileSearchResult,
    UrlSearchResult,
    WebSearchResult,
)


class TestLaunchDetached:
    """Test process spawning"""

    @patch("flint.core.process_launcher.IS_WINDOWS", False)
    @patch("flint.core.process_launcher.subprocess.Popen")
    def test_spawns_in_new_session(self, mock_popen):
        with patch.dict(os.environ, {"LD_PRELOAD": "/usr/lib/libgtk4-layer-shell.so"}):
            assert process_launcher.launch_detached(["firefox"], "/tmp")

        args, kwargs = mock_popen.call_args
        assert args == (["firefox"],)
        assert kwargs["start_new_session"] is True
        assert kwargs["cwd"] == "/tmp"
        assert "LD_PRELOAD" not in kwargs["env"]
        assert kwargs["stdout"] == subprocess.DEVNULL

    @patch("flint.core.process_launcher.subprocess.Popen")
    def test_spawn_failure(self, mock_popen):
        mock_popen.side_effect = FileNotFoundError("no such program")

        assert not process_launcher.launch_detached(["nonexistent"])


@patch("flint.core.process_launcher.IS_WINDOWS", False)
@patch("flint.core.process_launcher.first_available", return_value="xdg-open")
@patch("flint.core.process_launcher.launch_detached", return_value=True)
class TestExecuteResult:
    """Test the mapping from result type to action"""

    def test_app_runs_through_shell(self, mock_launch, mock_opener):
        result = AppSearchResult(AppEntry("Firefox", "firefox", "firefox --private-window"))

        assert process_launcher.execute_result(result)
        mock_launch.assert_called_once_with(["sh", "-c", "firefox --private-window"])

    def test_app_desktop_file_resolved(self, mock_launch, mock_opener, tmp_path):
        desktop_file = tmp_path / "foo.desktop"
        desktop_file.write_text(
            "[Desktop Entry]\nName=Foo\nExec=foo --new-window %U\nPath=/opt/foo\n"
        )
        result = AppSearchResult(AppEntry("foo", "foo", str(desktop_file)))

        assert process_launcher.execute_result(result)
        mock_launch.assert_called_once_with(["foo", "--new-window"], "/opt/foo")

    def test_desktop_file_without_exec_falls_back_to_shell(self, mock_launch, mock_opener, tmp_path):
        desktop_file = tmp_path / "bar.desktop"
        desktop_file.write_text("[Desktop Entry]\nName=Bar\n")

        process_launcher.launch_app(str(desktop_file))

        mock_launch.assert_called_once_with(["sh", "-c", str(desktop_file)])

    def test_command(self, mock_launch, mock_opener):
        assert process_launcher.execute_result(CommandSearchResult("ls -la"))
        mock_launch.assert_called_once_with(["sh", "-c", "ls -la"])

    def test_placeholder_is_noop(self, mock_launch, mock_opener):
        result = CommandSearchResult("Enter command...", placeholder=True)

        assert not process_launcher.execute_result(result)
        mock_launch.assert_not_called()

    def test_web_search(self, mock_launch, mock_opener):
        assert process_launcher.execute_result(WebSearchResult("rust lang"))
        mock_launch.assert_called_once_with(
            ["xdg-open", "https://duckduckgo.com/?q=rust%20lang"]
        )

    def test_url(self, mock_launch, mock_opener):
        process_launcher.execute_result(UrlSearchResult("https://github.com"))
        mock_launch.assert_called_once_with(["xdg-open", "https://github.com"])

    def test_file(self, mock_launch, mock_opener):
        process_launcher.execute_result(FileSearchResult("/home/user/report.pdf"))
        mock_launch.assert_called_once_with(["xdg-open", "/home/user/report.pdf"])

    def test_configured_opener(self, mock_launch, mock_opener):
        with patch("flint.core.process_launcher.URL_OPENER", "firefox"):
            process_launcher.open_url("https://github.com")
        mock_launch.assert_called_once_with(["firefox", "https://github.com"])

    def test_no_opener(self, mock_launch, mock_opener):
        mock_opener.return_value = None

        assert not process_launcher.open_url("https://github.com")
        mock_launch.assert_not_called()

    @patch("flint.core.process_launcher.copy_to_clipboard", return_value=True)
    def test_copy_results(self, mock_copy, mock_launch, mock_opener):
        process_launcher.execute_result(CalculationSearchResult("2+2", "4"))
        process_launcher.execute_result(EmojiSearchResult("fire", "🔥"))
        process_launcher.execute_result(CurrencySearchResult("USD", "EUR", 10.0, 9.2))

        assert [c.args[0] for c in mock_copy.call_args_list] == ["4", "🔥", "9.2"]
        mock_launch.assert_not_called()


@patch("flint.core.process_launcher.IS_WINDOWS", True)
@patch("flint.core.process_launcher.launch_detached", return_value=True)
class TestExecuteResultWindows:
    def test_app(self, mock_launch):
        process_launcher.launch_app("notepad.exe")
        mock_launch.assert_called_once_with(["cmd", "/C", "start", "", "notepad.exe"])

    def test_url(self, mock_launch):
        process_launcher.open_url("https://github.com")
        mock_launch.assert_called_once_with(["cmd", "/C", "start", "", "https://github.com"])

    def test_shell(self, mock_launch):
        process_launcher.run_shell("dir")
        mock_launch.assert_called_once_with(["cmd", "/C", "start", "cmd", "/C", "dir"])
