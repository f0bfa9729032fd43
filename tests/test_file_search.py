"""Unit tests for file and emoji search"""

from unittest.mock import patch
import sys
import os

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flint.utils.emoji_search import load_emoji_catalog, search_emojis
from flint.utils.file_search import get_search_dirs, read_user_dirs, search_files


def touch(directory, *names):
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text("")


class TestSearchFiles:
    """Test file name search"""

    def test_case_insensitive_substring(self, tmp_path):
        touch(tmp_path / "docs", "Report.pdf", "notes.txt")

        results = search_files("report", [str(tmp_path / "docs")])

        assert results == [str(tmp_path / "docs" / "Report.pdf")]

    def test_per_directory_cap(self, tmp_path):
        touch(tmp_path / "docs", *[f"report{i}.txt" for i in range(7)])

        results = search_files("report", [str(tmp_path / "docs")])

        assert len(results) == 5

    def test_sorted_by_name_length(self, tmp_path):
        touch(tmp_path / "a", "quarterly-report.pdf")
        touch(tmp_path / "b", "report.md")

        results = search_files("report", [str(tmp_path / "a"), str(tmp_path / "b")])

        assert [os.path.basename(p) for p in results] == ["report.md", "quarterly-report.pdf"]

    def test_total_cap(self, tmp_path):
        dirs = []
        for d in ("a", "b", "c"):
            touch(tmp_path / d, *[f"report{i}.txt" for i in range(5)])
            dirs.append(str(tmp_path / d))

        assert len(search_files("report", dirs)) == 8

    def test_unreadable_directory_skipped(self, tmp_path):
        touch(tmp_path / "docs", "report.pdf")

        results = search_files("report", [str(tmp_path / "missing"), str(tmp_path / "docs")])

        assert len(results) == 1


class TestUserDirs:
    def test_read_user_dirs(self, tmp_path):
        config_file = tmp_path / "user-dirs.dirs"
        config_file.write_text(
            "# written by xdg-user-dirs-update\n"
            'XDG_DOWNLOAD_DIR="$HOME/Dl"\n'
            'XDG_MUSIC_DIR="/mnt/music"\n'
        )

        user_dirs = read_user_dirs(str(config_file))

        assert user_dirs == {
            "DOWNLOAD": os.path.join(os.path.expanduser("~"), "Dl"),
            "MUSIC": "/mnt/music",
        }

    def test_missing_config(self, tmp_path):
        assert read_user_dirs(str(tmp_path / "nope")) == {}

    @patch("flint.utils.file_search.read_user_dirs")
    def test_search_dirs_fall_back_to_defaults(self, mock_read):
        mock_read.return_value = {"MUSIC": "/mnt/music"}

        dirs = get_search_dirs()

        assert len(dirs) == 6
        assert dirs[0] == os.path.expanduser("~/Downloads")
        assert dirs[4] == "/mnt/music"


class TestSearchEmojis:
    """Test emoji search"""

    def test_alias_then_catalog(self):
        assert search_emojis("heart") == [
            ("heart", "❤️"),
            ("smiling face with hearts", "🥰"),
            ("smiling face with heart-eyes", "😍"),
        ]

    def test_duplicate_glyphs_skipped(self):
        assert search_emojis("fire") == [("fire", "🔥"), ("fire engine", "🚒")]

    def test_caps(self):
        results = search_emojis("o")

        assert len(results) == 5
        assert results[:3] == [("love", "❤️"), ("cool", "😎"), ("ok", "👌")]

    def test_case_insensitive(self):
        assert search_emojis("ROCKET")[0] == ("rocket", "🚀")

    def test_no_match(self):
        assert search_emojis("zzzz") == []

    def test_catalog_file_format(self, tmp_path):
        catalog = tmp_path / "emojis.txt"
        catalog.write_text("🙂 slightly smiling face\nbroken\n\n🐍 snake\n", encoding="utf-8")

        assert load_emoji_catalog(str(catalog)) == (
            ("slightly smiling face", "🙂"),
            ("snake", "🐍"),
        )

    def test_bundled_catalog_loads(self):
        assert len(load_emoji_catalog()) > 300
