"""Centralized exception hierarchy for Contract Sizer.

Every fatal condition of a run is one of these errors. The CLI catches the base class
once and turns it into a message on stderr and a non-zero exit status.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract_sizer.models.contract import ThresholdViolation

MESSAGES: dict[str, str] = {
    "config.invalid": "Invalid configuration file {path}: {reason}",
    "options.invalid_check_max_size": "--checkMaxSize: invalid value {value}",
    "build_dir.unreadable": "Error while getting contracts from build directory: {reason}",
    "contracts.none_found": "No compiled artifacts to measure in {path}",
    "artifact.not_found": "Error while checking file {path}: {reason}",
    "artifact.not_a_file": "Error: {path} is not a valid file",
    "artifact.parse_failed": "Error: could not parse {path}: {reason}",
    "artifact.missing_field": "Error: {field} not found in {path} (it is not a contract json file)",
    "artifact.invalid_bytecode": "Error: invalid {field} in {path}: {reason}",
    "threshold.exceeded": "Contract {name} is bigger than {limit:g} KiB",
}


class ContractSizerError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, key: str, exit_code: int = 1, **params: object) -> None:
        """
        Initialize the error.

        Args:
            key: Message key in MESSAGES (e.g., 'artifact.not_found')
            exit_code: Process exit status the CLI should use
            **params: Parameters for the message template
        """
        super().__init__(key)
        self.key = key
        self.exit_code = exit_code
        self.params = params

    def __str__(self) -> str:
        template = MESSAGES.get(self.key)
        if template is None:
            params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
            return f"[{self.key}] {params_str}"
        return template.format(**self.params)


class ConfigError(ContractSizerError):
    """Raised when the configuration file cannot be read or validated."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__("config.invalid", exit_code=2, path=path, reason=reason)


class InvalidOptionError(ContractSizerError):
    """Raised when a command-line option has a value that cannot be used."""

    def __init__(self, key: str, **params: object) -> None:
        super().__init__(key, exit_code=2, **params)


class BuildDirectoryError(ContractSizerError):
    """Raised when the build output directory cannot be listed."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__("build_dir.unreadable", path=path, reason=reason)


class NoContractsError(ContractSizerError):
    """Raised when neither explicit names nor a directory scan yield any contract."""

    def __init__(self, path: object) -> None:
        super().__init__("contracts.none_found", path=path)


class ArtifactFileError(ContractSizerError):
    """Raised when an artifact path does not exist or is not a regular file."""


class ArtifactParseError(ContractSizerError):
    """Raised when an artifact is not a JSON object."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__("artifact.parse_failed", path=path, reason=reason)


class MissingFieldError(ContractSizerError):
    """Raised when a parsed artifact lacks a required field."""

    def __init__(self, path: object, field: str) -> None:
        super().__init__("artifact.missing_field", path=path, field=field)
        self.field = field


class InvalidBytecodeError(ContractSizerError):
    """Raised when the bytecode string is not a 0x-prefixed, even-length hex string."""

    def __init__(self, path: object, field: str, reason: str) -> None:
        super().__init__("artifact.invalid_bytecode", path=path, field=field, reason=reason)


class ExtractionError(ContractSizerError):
    """Raised after all extractions finished when at least one of them failed."""

    def __init__(self, errors: Sequence[ContractSizerError]) -> None:
        super().__init__("extraction.failed", count=len(errors))
        self.errors = list(errors)

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.errors)


class ThresholdExceededError(ContractSizerError):
    """Raised when one or more contracts are bigger than the configured limit."""

    def __init__(self, violations: Sequence["ThresholdViolation"]) -> None:
        super().__init__("threshold.exceeded.many", count=len(violations))
        self.violations = list(violations)

    def __str__(self) -> str:
        return "\n".join(
            MESSAGES["threshold.exceeded"].format(name=v.name, limit=v.limit) for v in self.violations
        )
