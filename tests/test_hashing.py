# Tests for dirmirror.utils.hashing
# Content hashing for change detection

import pytest

from dirmirror.utils.hashing import content_hash, file_hash, is_supported_algorithm


class TestContentHash:
    """Tests for content_hash."""

    def test_string_input(self):
        h = content_hash("hello")
        assert isinstance(h, str)
        assert len(h) == 64  # SHA256 hex length

    def test_bytes_input(self):
        assert content_hash(b"hello") == content_hash("hello")

    def test_different_content(self):
        assert content_hash("a") != content_hash("b")

    def test_other_algorithm(self):
        assert len(content_hash("hello", algorithm="md5")) == 32


class TestFileHash:
    """Tests for file_hash."""

    def test_matches_content_hash(self, temp_dir):
        f = temp_dir / "test.txt"
        f.write_bytes(b"hello")
        assert file_hash(f) == content_hash(b"hello")

    def test_empty_file(self, temp_dir):
        f = temp_dir / "empty.bin"
        f.write_bytes(b"")
        assert file_hash(f) == content_hash(b"")

    def test_large_file_read_in_chunks(self, temp_dir):
        data = b"0123456789" * 20000
        f = temp_dir / "big.bin"
        f.write_bytes(data)
        assert file_hash(f, chunk_size=1024) == content_hash(data)

    def test_same_content_same_hash(self, temp_dir):
        f1 = temp_dir / "a.txt"
        f2 = temp_dir / "b.txt"
        f1.write_text("same", encoding="utf-8")
        f2.write_text("same", encoding="utf-8")
        assert file_hash(f1) == file_hash(f2)

    def test_different_content_different_hash(self, temp_dir):
        f1 = temp_dir / "a.txt"
        f2 = temp_dir / "b.txt"
        f1.write_text("one", encoding="utf-8")
        f2.write_text("two", encoding="utf-8")
        assert file_hash(f1) != file_hash(f2)

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            file_hash(temp_dir / "missing.txt")


class TestIsSupportedAlgorithm:
    """Tests for is_supported_algorithm."""

    def test_known(self):
        assert is_supported_algorithm("sha256")
        assert is_supported_algorithm("sha1")

    def test_unknown(self):
        assert not is_supported_algorithm("not-a-hash")
