"""Data models for Contract Sizer."""

from contract_sizer.models.config import AppConfig, BuildConfig, LoggingConfig, ReportOptions
from contract_sizer.models.contract import (
    ContractArtifact,
    ContractRef,
    RunResult,
    SizeRecord,
    SizeUnit,
    SortField,
    SortOrder,
    ThresholdViolation,
)

__all__ = [
    "AppConfig",
    "BuildConfig",
    "LoggingConfig",
    "ReportOptions",
    "ContractArtifact",
    "ContractRef",
    "RunResult",
    "SizeRecord",
    "SizeUnit",
    "SortField",
    "SortOrder",
    "ThresholdViolation",
]
