# dirmirror Test Fixtures
# Pytest fixtures for dirmirror tests

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml

from dirmirror.logger import SyncLogger


def make_tree(root: Path, layout: dict) -> Path:
    """
    Build a directory tree from a nested dict.

    str values become files with that text, dict values become directories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            make_tree(path, value)
        else:
            path.write_text(value, encoding="utf-8")
    return root


def read_tree(root: Path) -> dict:
    """Inverse of make_tree."""
    result: dict = {}
    for path in sorted(root.iterdir()):
        if path.is_dir():
            result[path.name] = read_tree(path)
        else:
            result[path.name] = path.read_text(encoding="utf-8")
    return result


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """Source tree with nested directories and files."""
    return make_tree(
        temp_dir / "source",
        {
            "readme.txt": "hello",
            "docs": {
                "guide.md": "# Guide",
                "img": {"logo.svg": "<svg/>"},
            },
            "empty": {},
        },
    )


@pytest.fixture
def replica_dir(temp_dir: Path) -> Path:
    """Empty replica directory."""
    replica = temp_dir / "replica"
    replica.mkdir()
    return replica


@pytest.fixture
def log_dir(temp_dir: Path) -> Path:
    """Log directory path (not created)."""
    return temp_dir / "logs"


@pytest.fixture
def recording_logger() -> "RecordingLogger":
    """Logger that keeps messages in memory."""
    return RecordingLogger()


@pytest.fixture
def config_file(temp_dir: Path, source_dir: Path, replica_dir: Path, log_dir: Path) -> Path:
    """Create a configuration file."""
    config_path = temp_dir / "dirmirror.yaml"
    data = {
        "source": str(source_dir),
        "replica": str(replica_dir),
        "log_dir": str(log_dir),
        "interval": 5,
    }
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False)
    return config_path


class RecordingLogger(SyncLogger):
    """SyncLogger that records (level, message) pairs instead of printing."""

    def __init__(self):
        super().__init__()
        self.records: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def success(self, message: str) -> None:
        self.records.append(("success", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def build_tree():
    """Return the make_tree helper."""
    return make_tree


@pytest.fixture
def snapshot():
    """Return the read_tree helper."""
    return read_tree
