import os
from pathlib import Path
from typing import Union


def file_extension(path: Path) -> str:
    return path.suffix[1:].lower()


def ensure_dir(path: Path) -> None:
    os.makedirs(path, exist_ok=True)


def display_path(path: Union[str, Path]) -> str:
    return os.fsencode(path).decode("utf-8", "replace")
