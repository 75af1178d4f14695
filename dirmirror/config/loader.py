# dirmirror Configuration Loader
# Load YAML settings and merge them with command-line values

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from dirmirror.config.schema import REQUIRED_FIELDS, MirrorConfig


def load_config_data(config_path: Path) -> dict[str, Any]:
    """
    Load raw settings from a YAML file.

    Args:
        config_path: Path to config file.

    Returns:
        Mapping of settings. An empty file gives an empty mapping.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file doesn't hold a mapping.
        yaml.YAMLError: If the file isn't valid YAML.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {config_path}")

    return data


def merge_overrides(data: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay non-None override values on loaded settings."""
    merged = dict(data)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged


def missing_fields(data: dict[str, Any]) -> list[str]:
    """Required settings absent from data."""
    return [name for name in REQUIRED_FIELDS if data.get(name) is None]


def load_config(config_path: Optional[Path] = None, **overrides: Any) -> MirrorConfig:
    """
    Build a validated configuration.

    Args:
        config_path: Optional YAML file with settings.
        **overrides: Values that take precedence over the file (None is ignored).

    Returns:
        MirrorConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist.
        ValidationError: If the merged settings are invalid.
    """
    data = load_config_data(config_path) if config_path is not None else {}
    return MirrorConfig.model_validate(merge_overrides(data, overrides))


def validate_config_file(config_path: Path) -> tuple[bool, list[str]]:
    """
    Validate a configuration file.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    try:
        data = load_config_data(config_path)
    except FileNotFoundError as e:
        return False, [str(e)]
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]
    except ValueError as e:
        return False, [str(e)]

    errors = [f"{name}: field required" for name in missing_fields(data)]
    if errors:
        return False, errors

    try:
        MirrorConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return False, errors

    return True, []
