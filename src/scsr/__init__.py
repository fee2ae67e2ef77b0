"""scsr: smart contract size reporting for compiled build artifacts."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("scsr")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from scsr.api import discover_artifacts, run_report, run_report_async
from scsr.codes import ErrorCode, SizeStatus
from scsr.errors import ArtifactParseError, DirectoryMissingError, ScsrError
from scsr.kernel.config import ReportConfig
from scsr.kernel.report import ContractReport, SizeReport
from scsr.sinks import CollectingSink, ConsoleSink, ReportSink

__all__ = [
    "__version__",
    "discover_artifacts",
    "run_report",
    "run_report_async",
    "ErrorCode",
    "SizeStatus",
    "ScsrError",
    "ArtifactParseError",
    "DirectoryMissingError",
    "ReportConfig",
    "ContractReport",
    "SizeReport",
    "ReportSink",
    "ConsoleSink",
    "CollectingSink",
]
