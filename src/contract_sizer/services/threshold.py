"""Maximum contract size checks."""

import math
from decimal import Decimal

from contract_sizer.exceptions import InvalidOptionError
from contract_sizer.logger import get_logger
from contract_sizer.models.contract import RunResult, ThresholdViolation, displayed_kib

logger = get_logger(__name__)

# EIP-170 limit on Ethereum Mainnet, 24 KiB = 24576 bytes
DEFAULT_MAX_CONTRACT_SIZE_KIB = 24


def parse_max_size(value: bool | float | str | None) -> float | None:
    """Validate a max size option.

    Args:
        value: None or False (no check), True, "true" or "" (default limit),
               or a number / numeric string in KiB

    Returns:
        Limit in KiB, or None when no check is requested

    Raises:
        InvalidOptionError: If the value is not a finite, non-negative number
    """
    if value is None or value is False:
        return None
    if value is True:
        return float(DEFAULT_MAX_CONTRACT_SIZE_KIB)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lower() in ("", "true"):
            return float(DEFAULT_MAX_CONTRACT_SIZE_KIB)
        try:
            limit = float(stripped)
        except ValueError:
            raise InvalidOptionError("options.invalid_check_max_size", value=value) from None
    else:
        limit = float(value)

    if not math.isfinite(limit) or limit < 0:
        raise InvalidOptionError("options.invalid_check_max_size", value=value)
    return limit


def find_violations(result: RunResult, limit: float) -> list[ThresholdViolation]:
    """Find every contract whose displayed KiB size is strictly above the limit."""
    # str() keeps 24.12 from becoming 24.1199999... as a Decimal
    exact_limit = Decimal(str(limit))
    violations = []
    for record in result.records:
        shown = displayed_kib(record.size_bytes)
        if shown > exact_limit:
            logger.debug("Contract above limit", contract=record.name, size_kib=str(shown), limit=limit)
            violations.append(ThresholdViolation(name=record.name, size_kib=float(shown), limit=limit))
    return violations
