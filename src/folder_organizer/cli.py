import argparse
import sys
from typing import List, Optional

from .config import merge_config
from .organize import DirectoryReadError, organize, resolve_scan_root
from .report import report
from .run_log import resolve_log_path
from .util import display_path

EXAMPLES = """\
Examples:
  folder-organizer ~/Downloads
  folder-organizer ~/Downloads --dry-run
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folder-organizer",
        description="Copy the files of a folder into category subfolders by extension.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("folder", nargs="?", help="Folder to organize (not recursive)")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Only report what would be copied",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Append a JSON line per processed entry to this file",
    )
    parser.add_argument(
        "--max-collisions",
        type=int,
        default=None,
        help="Give up on a file after this many taken destination names",
    )
    return parser


def cmd_organize(args: argparse.Namespace) -> int:
    cfg = merge_config(
        {
            "max_collision_attempts": args.max_collisions,
            "log_path": args.log_file,
        }
    )
    try:
        root = resolve_scan_root(args.folder)
    except NotADirectoryError:
        print(
            f"Error: '{display_path(args.folder)}' is not a valid directory!",
            file=sys.stderr,
        )
        return 1

    print(f"Organizing folder: {display_path(root)}")
    if args.dry_run:
        print("Running in DRY-RUN mode (no files will be copied).")
    else:
        print("Safe Mode: files will be COPIED (originals left intact).")

    log_path = resolve_log_path(cfg["log_path"])
    try:
        counters = organize(
            root,
            args.dry_run,
            max_collision_attempts=cfg["max_collision_attempts"],
            log_path=log_path,
        )
    except NotADirectoryError:
        print(f"Error: '{display_path(root)}' is not a valid directory!", file=sys.stderr)
        return 1
    except DirectoryReadError as exc:
        print(f"Failed to read directory: {exc}", file=sys.stderr)
        return 1

    print()
    report(counters)
    print()
    if args.dry_run:
        print("Done! (dry run, nothing was copied.)")
    else:
        print("Done! (Safe Mode copy completed.)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.folder:
        parser.print_help(sys.stdout)
        return 1
    if args.max_collisions is not None and args.max_collisions < 1:
        print("--max-collisions must be at least 1.", file=sys.stderr)
        return 1
    return cmd_organize(args)


if __name__ == "__main__":
    raise SystemExit(main())
