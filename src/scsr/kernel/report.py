"""Report builder: collect, classify, filter and sort contract sizes.

Pipeline:
    artifact paths -> load (concurrently) -> ContractReport rows
    -> filter (unless detailed) -> sort by deployed size, descending
    -> sink.report_table (only when rows survive)

Per-artifact failures are reported to the sink as they happen and kept
out of the rows; they never abort the run.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from scsr.codes import ErrorCode, SizeStatus
from scsr.errors import ArtifactParseError
from scsr.kernel.artifact import ArtifactRecord, load_artifact_async
from scsr.kernel.config import DEFAULT_CONFIG, ReportConfig

if TYPE_CHECKING:
    from scsr.sinks import ReportSink


class ContractReport(BaseModel):
    """One report row, derived from one artifact."""
    source_path: str  # relative to project root, e.g. "./contracts/Token.sol"
    bytecode_length: int
    deployed_bytecode_length: int
    capacity_percent: int
    status: SizeStatus
    message: str
    artifact_path: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ArtifactIssue(BaseModel):
    """A per-artifact failure recorded during collection."""
    code: ErrorCode
    path: Optional[str] = None
    message: str


class SizeReport(BaseModel):
    """Result of one report run."""
    rows: List[ContractReport]  # filtered, sorted by deployed size descending
    errors: List[ArtifactIssue] = Field(default_factory=list)
    detailed: bool = False
    total_artifacts: int = 0
    config: ReportConfig = DEFAULT_CONFIG


def classify(deployed_bytecode_length: int, config: ReportConfig = DEFAULT_CONFIG) -> SizeStatus:
    """Classify a deployed size against the limit and notice threshold."""
    if deployed_bytecode_length > config.limit:
        return SizeStatus.OVER_LIMIT
    if deployed_bytecode_length >= config.notice_threshold:
        return SizeStatus.NEAR_LIMIT
    return SizeStatus.OK


def capacity_percent(deployed_bytecode_length: int, config: ReportConfig = DEFAULT_CONFIG) -> int:
    """Deployed size as a rounded integer percentage of the limit."""
    return round(100 * deployed_bytecode_length / config.limit)


def relative_source_path(source_path: str, root: Union[str, os.PathLike, Path]) -> str:
    """Replace a leading project root in source_path with '.'.

    Paths outside root are returned unchanged. The root only matches on a
    path component boundary, so '/work/app' does not match '/work/apple'.
    """
    root_str = os.fspath(root)
    if not root_str:
        return source_path
    stripped = root_str.rstrip("/\\")
    if not stripped:
        # filesystem root
        return "." + source_path if source_path.startswith(root_str[0]) else source_path
    if source_path == stripped:
        return "."
    if source_path.startswith(stripped) and source_path[len(stripped)] in "/\\":
        return "." + source_path[len(stripped):]
    return source_path


def make_row(
    record: ArtifactRecord,
    root: Union[str, os.PathLike, Path],
    config: ReportConfig = DEFAULT_CONFIG,
    artifact_path: Optional[Path] = None,
) -> ContractReport:
    """Derive a classified report row from an artifact record."""
    deployed = record.deployed_bytecode_length
    status = classify(deployed, config)
    return ContractReport(
        source_path=relative_source_path(record.source_path, root),
        bytecode_length=record.bytecode_length,
        deployed_bytecode_length=deployed,
        capacity_percent=capacity_percent(deployed, config),
        status=status,
        message=config.message_for(status),
        artifact_path=str(artifact_path) if artifact_path is not None else None,
    )


async def _load_or_error(
    path: Path,
    sink: Optional["ReportSink"],
) -> Union[ArtifactRecord, ArtifactParseError]:
    try:
        return await load_artifact_async(path)
    except ArtifactParseError as e:
        if sink is not None:
            sink.report_error(e)
        return e


async def collect_contracts(
    paths: Iterable[Union[str, os.PathLike, Path]],
    root: Union[str, os.PathLike, Path],
    config: ReportConfig = DEFAULT_CONFIG,
    sink: Optional["ReportSink"] = None,
) -> Tuple[List[ContractReport], List[ArtifactIssue]]:
    """Read all artifacts concurrently and turn them into rows.

    Rows and issues keep the order of paths. Failures are passed to
    sink.report_error as soon as each read fails.
    """
    artifact_paths = [Path(p) for p in paths]
    results = await asyncio.gather(*(_load_or_error(p, sink) for p in artifact_paths))

    rows: List[ContractReport] = []
    issues: List[ArtifactIssue] = []
    for artifact_path, result in zip(artifact_paths, results):
        if isinstance(result, ArtifactParseError):
            issues.append(ArtifactIssue(
                code=result.code,
                path=str(artifact_path),
                message=result.message,
            ))
            continue
        rows.append(make_row(result, root, config, artifact_path))
    return rows, issues


def filter_rows(
    rows: Sequence[ContractReport],
    detailed: bool,
    config: ReportConfig = DEFAULT_CONFIG,
) -> List[ContractReport]:
    """Drop rows below the display threshold unless detailed."""
    if detailed:
        return list(rows)
    return [row for row in rows if row.deployed_bytecode_length >= config.display_threshold]


def sort_rows(rows: Sequence[ContractReport]) -> List[ContractReport]:
    """Sort by deployed size, largest first. Ties keep their order."""
    return sorted(rows, key=lambda row: row.deployed_bytecode_length, reverse=True)


async def build_report(
    paths: Iterable[Union[str, os.PathLike, Path]],
    root: Union[str, os.PathLike, Path],
    detailed: bool = False,
    config: ReportConfig = DEFAULT_CONFIG,
    sink: Optional["ReportSink"] = None,
) -> SizeReport:
    """Run the full pipeline over artifact paths.

    The sink receives each parse error immediately and, if any rows survive
    filtering, the finished report. Nothing is sent to report_table for an
    empty report.
    """
    artifact_paths = list(paths)
    collected, issues = await collect_contracts(artifact_paths, root, config, sink)
    rows = sort_rows(filter_rows(collected, detailed, config))

    report = SizeReport(
        rows=rows,
        errors=issues,
        detailed=detailed,
        total_artifacts=len(artifact_paths),
        config=config,
    )
    if rows and sink is not None:
        sink.report_table(report)
    return report
