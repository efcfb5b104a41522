"""Tests for file system helpers."""

from pathlib import Path

from spec_cli.utils.file_utils import is_within, list_dirs, read_json_dict, write_file


class TestReadJsonDict:
    """Tests for read_json_dict."""

    def test_reads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text('{"devDependencies": {"jest": "^29"}}', encoding="utf-8")
        assert read_json_dict(path) == {"devDependencies": {"jest": "^29"}}

    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_json_dict(tmp_path / "package.json") is None

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_json_dict(path) is None

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert read_json_dict(path) is None


def test_write_file_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c.md"
    write_file(target, "")
    assert target.is_file()


def test_list_dirs_skips_files(tmp_path: Path) -> None:
    (tmp_path / "beta").mkdir()
    (tmp_path / "alpha").mkdir()
    (tmp_path / "notes.md").write_text("", encoding="utf-8")

    assert [p.name for p in list_dirs(tmp_path)] == ["alpha", "beta"]
    assert list_dirs(tmp_path / "missing") == []


class TestIsWithin:
    """Tests for is_within."""

    def test_child(self, tmp_path: Path) -> None:
        assert is_within(tmp_path / "tests" / "x.py", tmp_path)

    def test_root_itself(self, tmp_path: Path) -> None:
        assert not is_within(tmp_path / "tests" / "..", tmp_path)

    def test_escape(self, tmp_path: Path) -> None:
        assert not is_within(tmp_path / ".." / "elsewhere", tmp_path)
