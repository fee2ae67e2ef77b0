"""Exception types raised by scsr."""

from pathlib import Path
from typing import Optional

from scsr.codes import ErrorCode


class ScsrError(Exception):
    """Base class for scsr errors. Carries an ErrorCode."""

    code: ErrorCode

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class DirectoryMissingError(ScsrError, FileNotFoundError):
    """Raised when the artifact directory does not exist. Fatal to the run."""

    code = ErrorCode.DIRECTORY_MISSING


class ArtifactParseError(ScsrError, ValueError):
    """Raised when a single artifact file cannot be read or validated.

    Report runs catch this per artifact: the contract is excluded and the
    run continues.
    """

    code = ErrorCode.ARTIFACT_PARSE_ERROR

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message
