"""Size report services."""

from .extractor import compute_size_bytes, extract_size, extract_sizes
from .pipeline import SizeReport, run_report
from .report import aggregate, build_table, format_size, resolve_sort
from .resolver import resolve_contracts
from .threshold import DEFAULT_MAX_CONTRACT_SIZE_KIB, find_violations, parse_max_size

__all__ = [
    "DEFAULT_MAX_CONTRACT_SIZE_KIB",
    "SizeReport",
    "aggregate",
    "build_table",
    "compute_size_bytes",
    "extract_size",
    "extract_sizes",
    "find_violations",
    "format_size",
    "parse_max_size",
    "resolve_contracts",
    "resolve_sort",
    "run_report",
]
