from pathlib import PurePath

import pytest

from fc2_backup.core.path_filter import PathFilter, is_blacklisted, is_excluded, is_top_level

BLACKLIST = {"archives", "fc2t"}


class TestIsBlacklisted:
    """Blacklist matching on any path segment."""

    @pytest.mark.parametrize(
        "path",
        [
            "archives",
            "fc2t",
            "fc2t/stuff.txt",
            "constellation4/fc2t",
            "constellation4/fc2t/deep/file.lua",
            "a/b/archives/c",
        ],
    )
    def test_blacklisted_at_any_depth(self, path):
        assert is_blacklisted(PurePath(path), BLACKLIST) is True

    @pytest.mark.parametrize(
        "path",
        [
            "constellation4",
            "constellation4/scripts/a.lua",
            "fc2t.txt/inner",
            "my_archives/file",
        ],
    )
    def test_not_blacklisted(self, path):
        assert is_blacklisted(PurePath(path), BLACKLIST) is False

    def test_empty_blacklist(self):
        assert is_blacklisted(PurePath("archives/13.zip"), set()) is False


class TestIsExcluded:
    """Blacklist plus the top-level file rule."""

    def test_top_level_file_excluded(self):
        assert is_excluded(PurePath("loose.txt"), is_dir=False, blacklist=BLACKLIST) is True

    def test_top_level_directory_included(self):
        assert is_excluded(PurePath("constellation4"), is_dir=True, blacklist=BLACKLIST) is False

    def test_nested_file_included(self):
        assert is_excluded(PurePath("constellation4/loose.txt"), is_dir=False, blacklist=BLACKLIST) is False

    def test_blacklisted_directory_excluded(self):
        assert is_excluded(PurePath("fc2t"), is_dir=True, blacklist=BLACKLIST) is True

    def test_file_named_like_blacklist_excluded(self):
        assert is_excluded(PurePath("universe4/archives"), is_dir=False, blacklist=BLACKLIST) is True

    def test_is_top_level(self):
        assert is_top_level(PurePath("a")) is True
        assert is_top_level(PurePath("a/b")) is False


class TestPathFilter:

    def test_bound_blacklist(self):
        path_filter = PathFilter(["logs"])

        assert path_filter.is_excluded(PurePath("constellation4/logs"), is_dir=True) is True
        assert path_filter.is_excluded(PurePath("constellation4/scripts"), is_dir=True) is False
        assert path_filter.should_descend(PurePath("constellation4/logs")) is False
        assert path_filter.should_descend(PurePath("constellation4")) is True
