from typing import Any, Dict, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_collision_attempts": 10000,
    "log_path": None,
}


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    merged = dict(DEFAULT_CONFIG)
    if not overrides:
        return merged
    for key, value in overrides.items():
        if value is None:
            continue
        merged[key] = value
    return merged
