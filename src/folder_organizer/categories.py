from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

OTHERS = "Others"
ERRORS = "Errors"

_CATEGORY_TABLE: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("Images", frozenset({"jpg", "jpeg", "png", "gif", "svg", "bmp", "webp"})),
    (
        "Documents",
        frozenset({"pdf", "doc", "docx", "txt", "xls", "xlsx", "ppt", "pptx"}),
    ),
    ("Videos", frozenset({"mp4", "mov", "mkv", "webm", "avi"})),
    ("Audio", frozenset({"mp3", "wav", "flac", "aac"})),
    ("Archives", frozenset({"zip", "rar", "tar", "gz", "7z"})),
    (
        "Code",
        frozenset(
            {
                "rs",
                "py",
                "js",
                "ts",
                "go",
                "java",
                "c",
                "cpp",
                "html",
                "css",
                "json",
                "yaml",
                "yml",
            }
        ),
    ),
)

_CATEGORIES: Mapping[str, FrozenSet[str]] = MappingProxyType(dict(_CATEGORY_TABLE))

SUMMARY_ORDER: Tuple[str, ...] = tuple(name for name, _ in _CATEGORY_TABLE) + (
    OTHERS,
    ERRORS,
)


def categories() -> Mapping[str, FrozenSet[str]]:
    """Category name -> lowercase extensions without the leading dot."""
    return _CATEGORIES
