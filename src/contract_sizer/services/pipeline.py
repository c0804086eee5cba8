"""End-to-end size report for one invocation."""

import asyncio

from pydantic import BaseModel, Field

from contract_sizer.logger import get_logger
from contract_sizer.models.config import AppConfig
from contract_sizer.models.contract import RunResult, SizeUnit, ThresholdViolation
from contract_sizer.services.extractor import extract_sizes
from contract_sizer.services.report import aggregate
from contract_sizer.services.resolver import resolve_contracts
from contract_sizer.services.threshold import find_violations, parse_max_size

logger = get_logger(__name__)


class SizeReport(BaseModel):
    """Outcome of a run: the sorted sizes and, when checked, the limit violations."""

    result: RunResult
    unit: SizeUnit = SizeUnit.KIB
    violations: list[ThresholdViolation] = Field(default_factory=list)


def run_report(config: AppConfig) -> SizeReport:
    """Resolve, measure, aggregate and check the configured contracts.

    The max size option is validated before any file is touched.

    Raises:
        ContractSizerError: On any fatal condition except limit violations, which
                            are returned in the report
    """
    options = config.report
    limit = parse_max_size(options.check_max_size)

    refs = resolve_contracts(
        config.build,
        names=options.contracts,
        ignore_mocks=options.ignore_mocks,
        disambiguate_paths=options.disambiguate_paths,
    )
    records = asyncio.run(extract_sizes(refs))
    result = aggregate(records, options.sort)

    violations = find_violations(result, limit) if limit is not None else []
    if limit is not None:
        logger.info("Checked contract sizes", limit_kib=limit, violations=len(violations))

    return SizeReport(
        result=result,
        unit=SizeUnit.BYTES if options.size_in_bytes else SizeUnit.KIB,
        violations=violations,
    )
