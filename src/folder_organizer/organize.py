import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from .categories import ERRORS, OTHERS, categories
from .config import DEFAULT_CONFIG
from .report import new_counters
from .run_log import append_run_log, build_log_entry
from .util import display_path, ensure_dir, file_extension

MAX_COLLISION_ATTEMPTS = DEFAULT_CONFIG["max_collision_attempts"]


class CollisionLimitError(RuntimeError):
    """No free destination name was found within the attempt limit."""


class DirectoryReadError(RuntimeError):
    """The scan root could not be listed."""


@dataclass
class FileEntry:
    path: Path
    extension: str
    category: str


@dataclass
class CopyOp:
    src: Path
    dst: Path
    category: str


def classify(path: Union[str, Path]) -> str:
    ext = file_extension(Path(path))
    for name, exts in categories().items():
        if ext in exts:
            return name
    return OTHERS


def build_file_entry(path: Path) -> FileEntry:
    return FileEntry(path=path, extension=file_extension(path), category=classify(path))


def plan_destination(
    source: Path,
    category: str,
    scan_root: Path,
    *,
    max_attempts: int = MAX_COLLISION_ATTEMPTS,
) -> Path:
    """Return the first free name for ``source`` inside ``scan_root / category``.

    Taken names get ``_1``, ``_2``... appended to the stem, keeping the
    suffix. Nothing is created on disk.
    """
    dest_dir = scan_root / category
    dest = dest_dir / source.name
    if not os.path.lexists(dest):
        return dest
    stem = source.stem
    suffix = source.suffix
    for i in range(1, max_attempts + 1):
        candidate = dest_dir / f"{stem}_{i}{suffix}"
        if not os.path.lexists(candidate):
            return candidate
    raise CollisionLimitError(
        f"No free name for '{display_path(source.name)}' in "
        f"{display_path(dest_dir)} after {max_attempts} attempts"
    )


def resolve_destination(
    source: Path,
    category: str,
    scan_root: Path,
    *,
    max_attempts: int = MAX_COLLISION_ATTEMPTS,
) -> Path:
    ensure_dir(scan_root / category)
    return plan_destination(source, category, scan_root, max_attempts=max_attempts)


def resolve_scan_root(path: Union[str, Path]) -> Path:
    try:
        root = Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise NotADirectoryError(f"'{path}' is not a valid directory!") from exc
    if not root.is_dir():
        raise NotADirectoryError(f"'{root}' is not a directory!")
    return root


def _entry_kind(entry: os.DirEntry) -> str:
    if entry.is_symlink():
        return "symlink"
    if entry.is_dir(follow_symlinks=False):
        return "dir"
    return "file"


def list_entries(root: Path) -> List[os.DirEntry]:
    try:
        with os.scandir(root) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryReadError(str(exc)) from exc


def copy_to_category(
    entry: FileEntry, scan_root: Path, *, max_attempts: int = MAX_COLLISION_ATTEMPTS
) -> CopyOp:
    dest = resolve_destination(
        entry.path, entry.category, scan_root, max_attempts=max_attempts
    )
    shutil.copyfile(str(entry.path), str(dest))
    return CopyOp(src=entry.path, dst=dest, category=entry.category)


def organize(
    scan_root: Union[str, Path],
    dry_run: bool,
    *,
    max_collision_attempts: int = MAX_COLLISION_ATTEMPTS,
    log_path: Optional[Path] = None,
) -> Dict[str, int]:
    root = resolve_scan_root(scan_root)
    counters = new_counters()

    def record(**fields: object) -> None:
        if log_path:
            append_run_log(log_path, build_log_entry(dry_run=dry_run, **fields))

    for dir_entry in list_entries(root):
        path = Path(dir_entry.path)
        try:
            kind = _entry_kind(dir_entry)
        except OSError as exc:
            print(
                f"Could not read file type of '{display_path(path)}': {exc}",
                file=sys.stderr,
            )
            counters[ERRORS] += 1
            record(
                event="entry.error",
                source=path,
                category=None,
                destination=None,
                success=False,
                error_type=type(exc).__name__,
            )
            continue
        if kind != "file":
            continue

        entry = build_file_entry(path)
        if dry_run:
            try:
                planned = plan_destination(
                    path, entry.category, root, max_attempts=max_collision_attempts
                )
            except CollisionLimitError:
                planned = root / entry.category
            print(f"Would copy: '{display_path(path)}' -> '{display_path(planned)}'")
            counters[entry.category] += 1
            record(
                event="entry.planned",
                source=path,
                category=entry.category,
                destination=planned,
                success=True,
            )
            continue

        try:
            op = copy_to_category(entry, root, max_attempts=max_collision_attempts)
        except (OSError, CollisionLimitError) as exc:
            print(f"Failed to copy '{display_path(path)}': {exc}", file=sys.stderr)
            counters[ERRORS] += 1
            record(
                event="entry.error",
                source=path,
                category=entry.category,
                destination=None,
                success=False,
                error_type=type(exc).__name__,
            )
            continue
        print(f"Copied: '{display_path(op.src)}' -> '{display_path(op.dst)}'")
        counters[entry.category] += 1
        record(
            event="entry.copied",
            source=op.src,
            category=op.category,
            destination=op.dst,
            success=True,
        )
    return counters
