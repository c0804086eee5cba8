"""Configuration data models for Contract Sizer."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class BuildConfig(BaseModel):
    """Build tool layout: where compiled artifacts and contract sources live."""

    working_directory: Path = Field(default_factory=Path.cwd)
    contracts_build_directory: Path | None = None
    contracts_directory: Path | None = None
    source_extension: str = ".sol"

    @field_validator("working_directory", mode="before")
    @classmethod
    def expand_working_directory(cls, v: str | Path) -> Path:
        """Expand user path for working_directory."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @field_validator("contracts_build_directory", "contracts_directory", mode="before")
    @classmethod
    def expand_optional_path(cls, v: str | Path | None) -> Path | None:
        """Expand user path for optional paths."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    def model_post_init(self, __context: object) -> None:
        """Fill in the Truffle default layout and anchor relative paths."""
        if self.contracts_build_directory is None:
            self.contracts_build_directory = Path("build") / "contracts"
        if self.contracts_directory is None:
            self.contracts_directory = Path("contracts")
        if not self.contracts_build_directory.is_absolute():
            self.contracts_build_directory = self.working_directory / self.contracts_build_directory
        if not self.contracts_directory.is_absolute():
            self.contracts_directory = self.working_directory / self.contracts_directory


class ReportOptions(BaseModel):
    """Per-run report options, usually filled from the command line."""

    contracts: list[str] = Field(default_factory=list)
    # None: no check, True: default limit, number or string: explicit limit in KiB
    check_max_size: bool | float | str | None = None
    ignore_mocks: bool = False
    size_in_bytes: bool = False
    sort: list[str] | None = None
    disambiguate_paths: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"


class AppConfig(BaseModel):
    """Application configuration."""

    build: BuildConfig = Field(default_factory=BuildConfig)
    report: ReportOptions = Field(default_factory=ReportOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
