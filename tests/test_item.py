# Tests for dirmirror.sync.item
# Directory tree inventory

from pathlib import Path

import pytest

from dirmirror.sync.errors import DirectoryUnavailableError, ScanError
from dirmirror.sync.item import Item, scan_directory
from dirmirror.utils.hashing import content_hash


class TestItem:
    """Tests for Item."""

    def test_directory(self):
        item = Item.directory()
        assert item.is_directory is True
        assert item.content_hash == ""

    def test_file(self):
        item = Item.file("abc")
        assert item.is_directory is False
        assert item.content_hash == "abc"

    def test_value_equality(self):
        assert Item.file("abc") == Item(is_directory=False, content_hash="abc")
        assert Item.file("abc") != Item.file("def")

    def test_frozen(self):
        item = Item.directory()
        with pytest.raises(AttributeError):
            item.is_directory = False  # type: ignore[misc]


class TestScanDirectory:
    """Tests for scan_directory."""

    def test_full_tree(self, source_dir: Path):
        items = scan_directory(source_dir)

        assert set(items) == {
            "readme.txt",
            "docs",
            "docs/guide.md",
            "docs/img",
            "docs/img/logo.svg",
            "empty",
        }
        assert items["docs"] == Item.directory()
        assert items["empty"] == Item.directory()
        assert items["readme.txt"] == Item.file(content_hash("hello"))
        assert items["docs/img/logo.svg"] == Item.file(content_hash("<svg/>"))

    def test_empty_directory(self, replica_dir: Path):
        assert scan_directory(replica_dir) == {}

    def test_algorithm(self, source_dir: Path):
        items = scan_directory(source_dir, algorithm="md5")
        assert items["readme.txt"].content_hash == content_hash("hello", algorithm="md5")

    def test_missing_root(self, temp_dir: Path):
        with pytest.raises(DirectoryUnavailableError) as exc_info:
            scan_directory(temp_dir / "missing")
        assert exc_info.value.root == temp_dir / "missing"

    def test_root_is_file(self, temp_dir: Path):
        f = temp_dir / "file.txt"
        f.write_text("x", encoding="utf-8")
        with pytest.raises(DirectoryUnavailableError):
            scan_directory(f)

    def test_missing_root_is_scan_error(self, temp_dir: Path):
        with pytest.raises(ScanError):
            scan_directory(temp_dir / "missing")

    def test_unreadable_file_propagates(self, source_dir: Path, monkeypatch: pytest.MonkeyPatch):
        def _fail(path, **kwargs):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("dirmirror.sync.item.file_hash", _fail)

        with pytest.raises(ScanError) as exc_info:
            scan_directory(source_dir)
        assert exc_info.value.root == source_dir
        assert exc_info.value.entry is not None

    def test_dangling_symlink_recorded_with_empty_hash(self, replica_dir: Path):
        (replica_dir / "stale").symlink_to(replica_dir / "gone")
        (replica_dir / "a.txt").write_text("a", encoding="utf-8")

        items = scan_directory(replica_dir)

        assert items["stale"] == Item.file("")
        assert items["a.txt"] == Item.file(content_hash("a"))

    def test_does_not_modify_tree(self, source_dir: Path, snapshot):
        before = snapshot(source_dir)
        scan_directory(source_dir)
        assert snapshot(source_dir) == before

    def test_logs_progress(self, source_dir: Path, recording_logger):
        scan_directory(source_dir, logger=recording_logger)
        infos = recording_logger.messages("info")
        assert infos[0] == f"Scanning directory {source_dir}"
        assert "Scanning completed: 6 items" in infos[-1]
