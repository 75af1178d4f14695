# dirmirror Configuration Module
# YAML-based settings loading and validation

from dirmirror.config.loader import (
    load_config,
    load_config_data,
    merge_overrides,
    missing_fields,
    validate_config_file,
)
from dirmirror.config.schema import REQUIRED_FIELDS, MirrorConfig

__all__ = [
    # Schema
    "MirrorConfig",
    "REQUIRED_FIELDS",
    # Loader
    "load_config",
    "load_config_data",
    "merge_overrides",
    "missing_fields",
    "validate_config_file",
]
