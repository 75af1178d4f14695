# dirmirror Configuration Schema
# Pydantic model for run settings

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from dirmirror.utils.hashing import DEFAULT_ALGORITHM, is_supported_algorithm

REQUIRED_FIELDS = ("source", "replica", "log_dir", "interval")


class MirrorConfig(BaseModel):
    """Settings for a mirror run."""

    source: str = Field(description="Source directory (ground truth)")
    replica: str = Field(description="Replica directory kept in sync with source")
    log_dir: str = Field(description="Directory for the rotating log file")
    interval: int = Field(ge=1, description="Seconds between synchronization cycles")
    algorithm: str = Field(default=DEFAULT_ALGORITHM, description="Hash algorithm for file contents")
    verbose: bool = Field(default=False, description="Enable verbose output")
    log_backup_count: int = Field(default=30, ge=0, description="Rotated log files to keep")

    @field_validator("source", "replica", "log_dir")
    @classmethod
    def expand_paths(cls, v: str) -> str:
        """Expand ~ in paths."""
        return str(Path(v).expanduser())

    @field_validator("algorithm")
    @classmethod
    def check_algorithm(cls, v: str) -> str:
        """Reject names hashlib doesn't know."""
        if not is_supported_algorithm(v):
            raise ValueError(f"unsupported hash algorithm '{v}'")
        return v

    @property
    def source_path(self) -> Path:
        return Path(self.source)

    @property
    def replica_path(self) -> Path:
        return Path(self.replica)

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir)
