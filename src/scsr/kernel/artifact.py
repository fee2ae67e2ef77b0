"""Artifact reader: load one compiled contract artifact into a typed record."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scsr.errors import ArtifactParseError


class ArtifactRecord(BaseModel):
    """The fields of a compiled artifact that size reporting reads.

    Unknown fields (abi, ast, networks, ...) are ignored.
    """
    source_path: str = Field(..., alias="sourcePath")
    bytecode: str
    deployed_bytecode: str = Field(..., alias="deployedBytecode")

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True, populate_by_name=True)

    @property
    def bytecode_length(self) -> int:
        """Creation bytecode size in bytes (two hex digits per byte)."""
        return len(self.bytecode) // 2

    @property
    def deployed_bytecode_length(self) -> int:
        """Runtime bytecode size in bytes (two hex digits per byte)."""
        return len(self.deployed_bytecode) // 2


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{loc}: {err['msg']}")
    return "; ".join(problems)


def parse_artifact(data: Any, path: Optional[Path] = None) -> ArtifactRecord:
    """Validate an already-decoded artifact object (raises ArtifactParseError)."""
    if not isinstance(data, dict):
        raise ArtifactParseError(
            f"artifact must be a JSON object, got {type(data).__name__}", path
        )
    try:
        return ArtifactRecord.model_validate(data)
    except ValidationError as e:
        raise ArtifactParseError(
            f"invalid artifact: {_describe_validation_error(e)}", path
        ) from e


def load_artifact(path: Union[str, os.PathLike, Path]) -> ArtifactRecord:
    """Load and validate an artifact from a JSON file path.

    Every failure mode (I/O, encoding, JSON syntax, missing or mistyped
    field) is raised as ArtifactParseError.
    """
    artifact_path = Path(path)
    try:
        text = artifact_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ArtifactParseError(f"not valid UTF-8: {e.reason}", artifact_path) from e
    except OSError as e:
        raise ArtifactParseError(f"cannot read artifact: {e.strerror or e}", artifact_path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(
            f"malformed JSON at line {e.lineno} column {e.colno}: {e.msg}", artifact_path
        ) from e

    return parse_artifact(data, artifact_path)


async def load_artifact_async(path: Union[str, os.PathLike, Path]) -> ArtifactRecord:
    """Load an artifact without blocking the event loop."""
    return await asyncio.to_thread(load_artifact, path)
