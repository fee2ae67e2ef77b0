"""Public API for scsr.

High-level functions that locate compiled artifacts and run a complete
size report. Lower-level pieces live in scsr.kernel.
"""

import asyncio
import os
from pathlib import Path
from typing import List, Optional, Union

from scsr.errors import DirectoryMissingError
from scsr.kernel.config import DEFAULT_CONFIG, ReportConfig
from scsr.kernel.report import SizeReport, build_report
from scsr.sinks import ReportSink

DEFAULT_BUILD_DIR = Path("build") / "contracts"

DIRECTORY_MISSING_MESSAGE = "SCSR: Nothing found in the build directory. Please compile your project first."


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def resolve_root(root: Optional[Union[str, os.PathLike, Path]] = None) -> Path:
    """Absolute project root; the current directory when root is None."""
    if root is None:
        return Path.cwd()
    return Path(os.path.abspath(root))


def discover_artifacts(build_dir: Union[str, os.PathLike, Path]) -> List[Path]:
    """List artifact files directly inside build_dir, sorted by name.

    Raises DirectoryMissingError when build_dir does not exist.
    """
    directory = _normalize_path(build_dir)
    if not directory.is_dir():
        raise DirectoryMissingError(DIRECTORY_MISSING_MESSAGE, directory)
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


async def run_report_async(
    root: Optional[Union[str, os.PathLike, Path]] = None,
    detailed: bool = False,
    config: ReportConfig = DEFAULT_CONFIG,
    sink: Optional[ReportSink] = None,
    build_dir: Union[str, os.PathLike, Path] = DEFAULT_BUILD_DIR,
) -> SizeReport:
    """Discover artifacts under root and build the size report.

    build_dir is taken relative to root unless absolute.
    """
    project_root = resolve_root(root)
    paths = discover_artifacts(project_root / _normalize_path(build_dir))
    return await build_report(paths, project_root, detailed=detailed, config=config, sink=sink)


def run_report(
    root: Optional[Union[str, os.PathLike, Path]] = None,
    detailed: bool = False,
    config: ReportConfig = DEFAULT_CONFIG,
    sink: Optional[ReportSink] = None,
    build_dir: Union[str, os.PathLike, Path] = DEFAULT_BUILD_DIR,
) -> SizeReport:
    """Synchronous wrapper around run_report_async."""
    return asyncio.run(
        run_report_async(root, detailed=detailed, config=config, sink=sink, build_dir=build_dir)
    )
