"""Data models for contracts, artifacts and size results."""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

BYTES_PER_KIB = 1024
KIB_DISPLAY_STEP = Decimal("0.01")


def displayed_kib(size_bytes: int) -> Decimal:
    """KiB value as shown in the table: two decimals, halves rounded up."""
    return (Decimal(size_bytes) / BYTES_PER_KIB).quantize(KIB_DISPLAY_STEP, rounding=ROUND_HALF_UP)


class SizeUnit(str, Enum):
    """Display unit for sizes."""

    KIB = "KiB"
    BYTES = "Bytes"


class SortField(str, Enum):
    NAME = "name"
    SIZE = "size"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ContractRef(BaseModel):
    """One contract to measure."""

    name: str
    artifact_path: Path
    display_name: str | None = None


class ContractArtifact(BaseModel):
    """The part of a compiled artifact this tool reads.

    Truffle and Hardhat store ``deployedBytecode`` as a hex string, Foundry as an
    object with the hex string under ``object``. Both are reduced to the string.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    deployed_bytecode: str = Field(alias="deployedBytecode")

    @field_validator("deployed_bytecode", mode="before")
    @classmethod
    def unwrap_bytecode_object(cls, v: object) -> object:
        if isinstance(v, dict) and "object" in v:
            return v["object"]
        return v


class SizeRecord(BaseModel):
    """One row of output."""

    name: str
    size_bytes: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size_kib(self) -> float:
        return self.size_bytes / BYTES_PER_KIB


class RunResult(BaseModel):
    """All size records of one invocation."""

    records: list[SizeRecord] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_bytes(self) -> int:
        return sum(record.size_bytes for record in self.records)


class ThresholdViolation(BaseModel):
    """A contract whose displayed KiB size is above the limit."""

    name: str
    size_kib: float
    limit: float
