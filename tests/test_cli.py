"""End-to-end tests for the contract-sizer command."""

from pathlib import Path

import pytest

from contract_sizer.main import build_parser, main


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str, str]:
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_reports_all_contracts_with_total(capsys, write_artifact) -> None:
    write_artifact("A", 1000)
    write_artifact("B", 2000)
    write_artifact("C", 3000)

    code, out, _ = _run(capsys)

    assert code == 0
    assert "Contract" in out
    assert "0.98 KiB" in out
    total_line = next(line for line in out.splitlines() if "Total" in line)
    assert "5.86 KiB" in total_line


def test_size_in_bytes(capsys, write_artifact) -> None:
    write_artifact("A", 1000)
    write_artifact("B", 2000)
    write_artifact("C", 3000)

    code, out, _ = _run(capsys, "--sizeInBytes")

    assert code == 0
    assert "2000 Bytes" in out
    total_line = next(line for line in out.splitlines() if "Total" in line)
    assert "6000 Bytes" in total_line


def test_check_max_size_default_limit_fails(capsys, write_artifact) -> None:
    write_artifact("Small", 100)
    write_artifact("Huge", 30000)
    write_artifact("Bigger", 25000)

    code, out, err = _run(capsys, "--checkMaxSize")

    assert code == 1
    # Table is still printed before the failure
    assert "Huge" in out
    assert "Contract Huge is bigger than 24 KiB" in err
    assert "Contract Bigger is bigger than 24 KiB" in err
    assert "Small" not in err


def test_check_max_size_explicit_limit_passes(capsys, write_artifact) -> None:
    write_artifact("Huge", 30000)

    code, _, err = _run(capsys, "--check-max-size", "48")

    assert code == 0
    assert "bigger" not in err


def test_without_check_max_size_never_fails(capsys, write_artifact) -> None:
    write_artifact("Enormous", 100_000)

    code, _, _ = _run(capsys)

    assert code == 0


def test_invalid_check_max_size_fails_before_reading_files(capsys, tmp_path: Path) -> None:
    code, out, err = _run(capsys, "--checkMaxSize", "abc", "--build-dir", str(tmp_path / "does-not-exist"))

    assert code == 2
    assert out == ""
    assert "--checkMaxSize: invalid value abc" in err


def test_empty_build_directory(capsys, build_dir: Path) -> None:
    code, out, err = _run(capsys)

    assert code == 1
    assert out == ""
    assert "No compiled artifacts to measure" in err


def test_missing_build_directory(capsys, tmp_path: Path) -> None:
    code, out, err = _run(capsys, "--build-dir", str(tmp_path / "nope"))

    assert code == 1
    assert out == ""
    assert "Error while getting contracts from build directory" in err


def test_requested_contract_without_artifact(capsys, build_dir: Path, write_artifact) -> None:
    write_artifact("Token", 10)

    code, out, err = _run(capsys, "--contracts", "Token", "Ghost")

    assert code == 1
    assert out == ""
    assert str(build_dir / "Ghost.json") in err


def test_scanned_directory_named_like_artifact(capsys, build_dir: Path, write_artifact) -> None:
    write_artifact("Token", 10)
    (build_dir / "Weird.json").mkdir()

    code, out, err = _run(capsys)

    assert code == 1
    assert out == ""
    assert f"Error: {build_dir / 'Weird.json'} is not a valid file" in err


def test_malformed_artifact_reported_without_traceback(capsys, build_dir: Path) -> None:
    (build_dir / "Deep.json").write_text("[" * 200_000, encoding="utf-8")

    code, out, err = _run(capsys)

    assert code == 1
    assert out == ""
    assert "could not parse" in err


def test_ignore_mocks_versus_explicit_selection(capsys, write_artifact) -> None:
    write_artifact("Token", 10)
    write_artifact("TokenMock", 10)

    _, out, _ = _run(capsys, "--ignoreMocks")
    assert "TokenMock" not in out
    assert "Token" in out

    _, out, _ = _run(capsys, "--ignoreMocks", "--contracts", "TokenMock")
    assert "TokenMock" in out


def test_sort_by_size_descending(capsys, write_artifact) -> None:
    write_artifact("Alpha", 3000)
    write_artifact("Beta", 1000)
    write_artifact("Gamma", 2000)

    _, out, _ = _run(capsys, "--sort", "size", "desc")

    assert out.index("Alpha") < out.index("Gamma") < out.index("Beta")


def test_invalid_sort_warns_but_succeeds(capsys, write_artifact) -> None:
    write_artifact("Beta", 1000)
    write_artifact("Alpha", 3000)

    code, out, err = _run(capsys, "--sort", "weight", "asc")

    assert code == 0
    assert out.index("Alpha") < out.index("Beta")
    assert "Invalid sort field" in err


def test_disambiguate_paths(capsys, write_artifact) -> None:
    write_artifact("Token", 10)

    code, out, _ = _run(capsys, "--disambiguatePaths")

    assert code == 0
    assert "contracts/Token.sol" in out


def test_config_file_supplies_defaults(capsys, tmp_path: Path, write_artifact) -> None:
    write_artifact("Huge", 30000)
    config_path = tmp_path / "ci.yaml"
    config_path.write_text("report:\n  check_max_size: true\n", encoding="utf-8")

    code, _, err = _run(capsys, "--config", str(config_path))

    assert code == 1
    assert "Contract Huge is bigger than 24 KiB" in err


def test_invalid_config_file(capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "contract-sizer.yaml"
    config_path.write_text("report: [oops\n", encoding="utf-8")

    code, out, err = _run(capsys)

    assert code == 2
    assert out == ""
    assert "Invalid configuration file" in err


def test_parser_accepts_original_flag_names() -> None:
    args = build_parser().parse_args(
        ["--contracts", "A", "B", "--checkMaxSize", "--ignoreMocks", "--sort", "size", "desc", "--disambiguatePaths"]
    )

    assert args.contracts == ["A", "B"]
    assert args.check_max_size is True
    assert args.ignore_mocks is True
    assert args.sort == ["size", "desc"]
    assert args.disambiguate_paths is True
    assert args.size_in_bytes is None
