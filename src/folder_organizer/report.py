import sys
from typing import Dict, List, Mapping, Optional, TextIO

from .categories import SUMMARY_ORDER


def new_counters() -> Dict[str, int]:
    return {name: 0 for name in SUMMARY_ORDER}


def format_summary(counters: Mapping[str, int]) -> List[str]:
    lines = ["Summary:"]
    for name in SUMMARY_ORDER:
        lines.append(f"  - {name:<9} : {counters.get(name, 0)}")
    return lines


def report(counters: Mapping[str, int], stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in format_summary(counters):
        print(line, file=out)
