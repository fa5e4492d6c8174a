"""Advanced Custom Fields JSON storage location."""

from typing import Any


def acf_save_json_path(path: str, *, fields_dir: str) -> str:
    """Save field group JSON to ``fields_dir`` instead of the theme."""
    return fields_dir


def acf_load_json_paths(paths: Any, *, fields_dir: str) -> list[str]:
    """Load field group JSON from ``fields_dir`` only."""
    return [fields_dir]
