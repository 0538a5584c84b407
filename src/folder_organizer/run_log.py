from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .util import ensure_dir


def resolve_log_path(path_value: Optional[str]) -> Optional[Path]:
    if not path_value:
        return None
    expanded = Path(path_value).expanduser()
    if not expanded.is_absolute():
        expanded = Path.cwd() / expanded
    return expanded


def build_log_entry(
    *,
    event: str,
    source: Path,
    category: Optional[str],
    destination: Optional[Path],
    dry_run: bool,
    success: bool,
    error_type: Optional[str] = None,
) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "source": str(source),
        "dry_run": dry_run,
        "success": success,
    }
    if category is not None:
        entry["category"] = category
    if destination is not None:
        entry["destination"] = str(destination)
    if error_type:
        entry["error_type"] = error_type
    return entry


def append_run_log(log_path: Path, entry: Dict[str, Any]) -> None:
    try:
        ensure_dir(log_path.parent)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(entry) + "\n")
    except OSError:
        return
