"""Resolution of the contracts to measure."""

from pathlib import Path, PurePosixPath

from contract_sizer.exceptions import BuildDirectoryError, NoContractsError
from contract_sizer.logger import get_logger
from contract_sizer.models.config import BuildConfig
from contract_sizer.models.contract import ContractRef

logger = get_logger(__name__)

ARTIFACT_SUFFIX = ".json"
MOCK_SUFFIX = "Mock"


def list_contract_names(build_dir: Path, ignore_mocks: bool = False) -> list[str]:
    """List contract names from the artifacts in a build directory.

    Args:
        build_dir: Directory holding one <Name>.json artifact per contract
        ignore_mocks: Drop contracts whose name ends with "Mock"

    Returns:
        Sorted contract names, without the .json suffix

    Raises:
        BuildDirectoryError: If the directory cannot be listed
    """
    try:
        entries = list(build_dir.iterdir())
    except OSError as e:
        raise BuildDirectoryError(build_dir, e.strerror or str(e)) from e

    names = []
    for entry in entries:
        if not entry.name.endswith(ARTIFACT_SUFFIX):
            continue
        name = entry.name[: -len(ARTIFACT_SUFFIX)]
        if ignore_mocks and name.endswith(MOCK_SUFFIX):
            logger.debug("Skipping mock contract", contract=name)
            continue
        names.append(name)

    return sorted(names)


def display_name_for(name: str, build: BuildConfig) -> str:
    """Source-relative name such as ``contracts/Token.sol``."""
    assert build.contracts_directory is not None
    try:
        source_dir = build.contracts_directory.relative_to(build.working_directory)
    except ValueError:
        # Contracts live outside the project, keep the absolute location
        source_dir = build.contracts_directory
    return str(PurePosixPath(source_dir.as_posix()) / f"{name}{build.source_extension}")


def resolve_contracts(
    build: BuildConfig,
    names: list[str] | None = None,
    ignore_mocks: bool = False,
    disambiguate_paths: bool = False,
) -> list[ContractRef]:
    """Determine the contracts to measure.

    Explicit names are used as given and are never mock-filtered. Without names, the
    build directory is scanned.

    Args:
        build: Build layout
        names: Explicit contract names, optional
        ignore_mocks: Drop *Mock contracts from a directory scan
        disambiguate_paths: Also compute display names relative to the project

    Returns:
        Ordered, duplicate-free contract references

    Raises:
        BuildDirectoryError: If the build directory cannot be listed
        NoContractsError: If nothing is left to measure
    """
    build_dir = build.contracts_build_directory
    assert build_dir is not None

    if names:
        # dict keeps first occurrence order
        selected = list(dict.fromkeys(_strip_suffix(name) for name in names))
    else:
        selected = list_contract_names(build_dir, ignore_mocks=ignore_mocks)

    if not selected:
        raise NoContractsError(build_dir)

    refs = [
        ContractRef(
            name=name,
            artifact_path=build_dir / f"{name}{ARTIFACT_SUFFIX}",
            display_name=display_name_for(name, build) if disambiguate_paths else None,
        )
        for name in selected
    ]
    logger.debug("Resolved contracts", count=len(refs), build_dir=str(build_dir))
    return refs


def _strip_suffix(name: str) -> str:
    if name.endswith(ARTIFACT_SUFFIX):
        return name[: -len(ARTIFACT_SUFFIX)]
    return name
