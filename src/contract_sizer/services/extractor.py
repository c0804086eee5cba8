"""Deployed bytecode size extraction from compiled artifacts."""

import asyncio
import json
import stat
from pathlib import Path

from pydantic import ValidationError

from contract_sizer.exceptions import (
    ArtifactFileError,
    ArtifactParseError,
    ContractSizerError,
    ExtractionError,
    InvalidBytecodeError,
    MissingFieldError,
)
from contract_sizer.logger import get_logger
from contract_sizer.models.contract import ContractArtifact, ContractRef, SizeRecord

logger = get_logger(__name__)

BYTECODE_FIELD = "deployedBytecode"
HEX_PREFIX = "0x"


def compute_size_bytes(bytecode: str) -> int:
    """Number of bytes in a 0x-prefixed hex string.

    Raises:
        ValueError: If the prefix is missing or the digit count is odd
    """
    if not bytecode.startswith(HEX_PREFIX):
        raise ValueError("missing 0x prefix")
    digits = len(bytecode) - len(HEX_PREFIX)
    if digits % 2:
        raise ValueError(f"odd number of hex digits ({digits})")
    return digits // 2


def check_artifact_file(path: Path) -> None:
    """Ensure the artifact path exists and is a regular file.

    Raises:
        ArtifactFileError: If it is missing, dangling or not a regular file
    """
    try:
        mode = path.stat().st_mode
    except OSError as e:
        raise ArtifactFileError("artifact.not_found", path=path, reason=e.strerror or str(e)) from e
    if not stat.S_ISREG(mode):
        raise ArtifactFileError("artifact.not_a_file", path=path)


def load_artifact(path: Path) -> ContractArtifact:
    """Parse an artifact file.

    Raises:
        ArtifactParseError: If the file is not a JSON object
        MissingFieldError: If deployedBytecode is absent
        InvalidBytecodeError: If deployedBytecode is not a string
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit
    except (OSError, ValueError, RecursionError) as e:
        raise ArtifactParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ArtifactParseError(path, f"expected a JSON object, got {type(data).__name__}")
    if BYTECODE_FIELD not in data:
        raise MissingFieldError(path, BYTECODE_FIELD)

    try:
        return ContractArtifact.model_validate(data)
    except ValidationError as e:
        raise InvalidBytecodeError(path, BYTECODE_FIELD, "expected a hex string") from e


def extract_size(ref: ContractRef) -> SizeRecord:
    """Measure one contract.

    Args:
        ref: Contract to measure

    Returns:
        Size record named after the display name when one is set

    Raises:
        ContractSizerError: On a missing, unreadable or malformed artifact
    """
    check_artifact_file(ref.artifact_path)
    artifact = load_artifact(ref.artifact_path)

    try:
        size_bytes = compute_size_bytes(artifact.deployed_bytecode)
    except ValueError as e:
        raise InvalidBytecodeError(ref.artifact_path, BYTECODE_FIELD, str(e)) from e

    logger.debug("Measured contract", contract=ref.name, size_bytes=size_bytes)
    return SizeRecord(name=ref.display_name or ref.name, size_bytes=size_bytes)


async def extract_sizes(refs: list[ContractRef]) -> list[SizeRecord]:
    """Measure all contracts concurrently.

    Every artifact is read in its own worker thread. Failures are collected and
    reported together once all tasks have finished.

    Args:
        refs: Contracts to measure

    Returns:
        Size records in the order of refs

    Raises:
        ExtractionError: If at least one extraction failed
    """
    results = await asyncio.gather(
        *(asyncio.to_thread(extract_size, ref) for ref in refs),
        return_exceptions=True,
    )

    records: list[SizeRecord] = []
    errors: list[ContractSizerError] = []
    for ref, result in zip(refs, results, strict=True):
        if isinstance(result, ContractSizerError):
            logger.debug("Extraction failed", contract=ref.name, error=str(result))
            errors.append(result)
        elif isinstance(result, BaseException):
            raise result
        else:
            records.append(result)

    if errors:
        raise ExtractionError(errors)
    return records
