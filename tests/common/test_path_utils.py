"""
Tests for path_utils module.
"""

from pathlib import Path

from eju_toolkit.common.path_utils import (
    is_fragment_file,
    list_fragment_files,
    resolve_path,
)


class TestIsFragmentFile:
    """Tests for is_fragment_file()."""

    def test_json_file(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text("{}")
        assert is_fragment_file(path)

    def test_wrong_suffix(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("{}")
        assert not is_fragment_file(path)

    def test_suffix_is_case_sensitive(self, tmp_path):
        path = tmp_path / "a.JSON"
        path.write_text("{}")
        assert not is_fragment_file(path)

    def test_directory_is_not_fragment(self, tmp_path):
        path = tmp_path / "dir.json"
        path.mkdir()
        assert not is_fragment_file(path)

    def test_missing_file(self, tmp_path):
        assert not is_fragment_file(tmp_path / "gone.json")

    def test_custom_suffix(self, tmp_path):
        path = tmp_path / "a.frag.json"
        path.write_text("{}")
        assert is_fragment_file(path, ".frag.json")


class TestListFragmentFiles:

    def test_sorted_by_name(self, tmp_path):
        for name in ["c.json", "a.json", "b.json"]:
            (tmp_path / name).write_text("{}")

        assert [p.name for p in list_fragment_files(tmp_path)] == ["a.json", "b.json", "c.json"]

    def test_subdirectories_not_searched(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "a.json").write_text("{}")

        assert list_fragment_files(tmp_path) == []


class TestResolvePath:

    def test_relative_resolved_against_base(self, tmp_path):
        assert resolve_path("data", tmp_path) == (tmp_path / "data").resolve()

    def test_absolute_unchanged(self, tmp_path):
        target = tmp_path / "out.jsx"
        assert resolve_path(target, Path("/elsewhere")) == target.resolve()

    def test_relative_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_path("dist/x.jsx") == (tmp_path / "dist" / "x.jsx").resolve()
