import argparse
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from contract_sizer import __version__
from contract_sizer.config import ConfigManager
from contract_sizer.exceptions import ContractSizerError, ThresholdExceededError
from contract_sizer.logger import configure_logging, get_logger
from contract_sizer.models.config import LoggingConfig
from contract_sizer.services.pipeline import run_report
from contract_sizer.services.report import build_table

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contract-sizer",
        description="Contract Sizer - report the deployed size of compiled smart contracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  contract-sizer                                  # All contracts in build/contracts
  contract-sizer --contracts Token Crowdsale      # Only these contracts
  contract-sizer --checkMaxSize                   # Fail if any contract exceeds 24 KiB
  contract-sizer --checkMaxSize 48 --ignoreMocks  # Custom limit, skip *Mock contracts
  contract-sizer --sort size desc --sizeInBytes   # Biggest first, exact byte counts
        """,
    )

    parser.add_argument(
        "--contracts",
        nargs="+",
        metavar="NAME",
        help="Only display certain contracts",
    )
    parser.add_argument(
        "--checkMaxSize",
        "--check-max-size",
        dest="check_max_size",
        nargs="?",
        const=True,
        metavar="KIB",
        help="Return an error exit code if a contract is bigger than the optional size in KiB (default: 24)",
    )
    parser.add_argument(
        "--ignoreMocks",
        "--ignore-mocks",
        dest="ignore_mocks",
        action="store_true",
        default=None,
        help='Ignore all contracts whose names end with "Mock"',
    )
    parser.add_argument(
        "--sizeInBytes",
        "--size-in-bytes",
        dest="size_in_bytes",
        action="store_true",
        default=None,
        help="Display sizes in bytes instead of KiB",
    )
    parser.add_argument(
        "--sort",
        nargs="*",
        metavar="FIELD ORDER",
        help="Sort the table by name or size, asc or desc (default: name asc)",
    )
    parser.add_argument(
        "--disambiguatePaths",
        "--disambiguate-paths",
        dest="disambiguate_paths",
        action="store_true",
        default=None,
        help="Display the source path of contracts in the table",
    )

    parser.add_argument("--build-dir", type=Path, metavar="DIR", help="Directory of compiled contract artifacts")
    parser.add_argument("--contracts-dir", type=Path, metavar="DIR", help="Directory of contract sources")
    parser.add_argument("--working-dir", type=Path, metavar="DIR", help="Project root (default: current directory)")
    parser.add_argument("--config", type=Path, metavar="FILE", help="Config file (default: ./contract-sizer.yaml)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for stderr diagnostics",
    )
    parser.add_argument("--log-format", choices=["console", "json"], help="Log output format")

    parser.add_argument(
        "--version",
        action="version",
        version=f"Contract Sizer {__version__}",
    )

    return parser


def _overrides_from_args(args: argparse.Namespace) -> dict[str, dict[str, Any]]:
    return {
        "build": {
            "working_directory": args.working_dir,
            "contracts_build_directory": args.build_dir,
            "contracts_directory": args.contracts_dir,
        },
        "report": {
            "contracts": args.contracts,
            "check_max_size": args.check_max_size,
            "ignore_mocks": args.ignore_mocks,
            "size_in_bytes": args.size_in_bytes,
            "sort": args.sort,
            "disambiguate_paths": args.disambiguate_paths,
        },
        "logging": {
            "level": args.log_level,
            "format": args.log_format,
        },
    }


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI argument parsing.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(LoggingConfig())
    err_console = Console(stderr=True, highlight=False)

    try:
        config = ConfigManager(args.config).load(_overrides_from_args(args))
        configure_logging(config.logging)

        report = run_report(config)
        Console(highlight=False).print(build_table(report.result, report.unit))

        if report.violations:
            raise ThresholdExceededError(report.violations)
    except ContractSizerError as e:
        logger.debug("Run failed", key=e.key, exit_code=e.exit_code)
        err_console.print(str(e), markup=False, soft_wrap=True)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
