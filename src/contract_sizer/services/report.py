"""Aggregation, sorting and table rendering of size records."""

from rich import box
from rich.table import Table

from contract_sizer.logger import get_logger
from contract_sizer.models.contract import RunResult, SizeRecord, SizeUnit, SortField, SortOrder, displayed_kib

logger = get_logger(__name__)

CONTRACT_COLUMN_WIDTH = 70
TOTAL_LABEL = "Total"


def format_size(size_bytes: int, unit: SizeUnit = SizeUnit.KIB) -> str:
    """Format a byte count, e.g. ``"23.45 KiB"`` or ``"24012 Bytes"``."""
    if unit is SizeUnit.BYTES:
        return f"{size_bytes} {unit.value}"
    return f"{displayed_kib(size_bytes)} {unit.value}"


def resolve_sort(sort: list[str] | None) -> tuple[SortField, SortOrder]:
    """Turn raw ``[field, order]`` values into a sort key.

    Invalid or missing values fall back to name / asc with a warning. No sort option
    at all means name / asc silently.
    """
    if sort is None:
        return SortField.NAME, SortOrder.ASC

    raw_field = sort[0] if len(sort) > 0 else None
    raw_order = sort[1] if len(sort) > 1 else None

    if raw_field is None and raw_order is None:
        logger.warning("Sort defaults to name and asc")
        return SortField.NAME, SortOrder.ASC

    try:
        field = SortField(raw_field)
    except ValueError:
        logger.warning("Invalid sort field, using name", value=raw_field, valid=[f.value for f in SortField])
        field = SortField.NAME

    try:
        order = SortOrder(raw_order)
    except ValueError:
        logger.warning("Invalid sort order, using asc", value=raw_order, valid=[o.value for o in SortOrder])
        order = SortOrder.ASC

    return field, order


def sort_records(records: list[SizeRecord], field: SortField, order: SortOrder) -> list[SizeRecord]:
    reverse = order is SortOrder.DESC
    if field is SortField.SIZE:
        return sorted(records, key=lambda r: (r.size_bytes, r.name), reverse=reverse)
    return sorted(records, key=lambda r: r.name, reverse=reverse)


def aggregate(records: list[SizeRecord], sort: list[str] | None = None) -> RunResult:
    """Collect records into a sorted run result."""
    field, order = resolve_sort(sort)
    return RunResult(records=sort_records(records, field, order))


def build_table(result: RunResult, unit: SizeUnit = SizeUnit.KIB) -> Table:
    """Two-column Contract / Size table with an emphasized total row."""
    table = Table(box=box.SQUARE, header_style="bold")
    table.add_column("Contract", justify="left", max_width=CONTRACT_COLUMN_WIDTH, overflow="fold")
    table.add_column("Size", justify="right", no_wrap=True)

    for record in result.records:
        table.add_row(record.name, format_size(record.size_bytes, unit))

    table.add_section()
    table.add_row(TOTAL_LABEL, format_size(result.total_bytes, unit), style="bold")
    return table
