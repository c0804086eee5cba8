import json
from collections.abc import Callable
from pathlib import Path

import pytest

from contract_sizer.models.config import BuildConfig

ArtifactWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory without CONTRACT_SIZER_* variables."""
    for name in (
        "CONTRACT_SIZER_CONFIG_PATH",
        "CONTRACT_SIZER_BUILD_DIR",
        "CONTRACT_SIZER_CONTRACTS_DIR",
        "CONTRACT_SIZER_WORKING_DIR",
        "CONTRACT_SIZER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    path = tmp_path / "build" / "contracts"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def build_config(tmp_path: Path, build_dir: Path) -> BuildConfig:
    return BuildConfig(working_directory=tmp_path, contracts_build_directory=build_dir)


@pytest.fixture
def write_artifact(build_dir: Path) -> ArtifactWriter:
    """Write <name>.json with a deployedBytecode of size_bytes bytes."""

    def _write(name: str, size_bytes: int = 0, **extra: object) -> Path:
        path = build_dir / f"{name}.json"
        data = {"contractName": name, "deployedBytecode": "0x" + "60" * size_bytes, **extra}
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
