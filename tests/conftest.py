"""Pytest configuration and shared fixtures.

No sys.path hacks - tests should import from installed scsr package.
"""

import json
from pathlib import Path

import pytest


def hex_of_bytes(n: int) -> str:
    """Hex string encoding n bytes."""
    return "60" * n


@pytest.fixture
def project(tmp_path) -> Path:
    """A project root with an empty build/contracts directory."""
    (tmp_path / "build" / "contracts").mkdir(parents=True)
    return tmp_path.resolve()


@pytest.fixture
def write_artifact(project):
    """Factory writing a compiled artifact into build/contracts."""

    def _write(name: str, deployed_bytes: int, bytecode_bytes=None, source=None, **extra) -> Path:
        data = {
            "contractName": name,
            "abi": [],
            "bytecode": hex_of_bytes(bytecode_bytes if bytecode_bytes is not None else deployed_bytes + 32),
            "deployedBytecode": hex_of_bytes(deployed_bytes),
            "sourcePath": source or str(project / "contracts" / f"{name}.sol"),
        }
        data.update(extra)
        path = project / "build" / "contracts" / f"{name}.json"
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write
