"""scsr CLI: report compiled contract sizes against the deployment limit."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def parse_detailed(value: str) -> bool:
    """'true' (any case) enables detailed mode; anything else disables it."""
    return value.strip().lower() == "true"


def main():
    """Main CLI entry point for scsr."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        scsr_version = get_version("scsr")
    except PackageNotFoundError:
        scsr_version = "dev"

    parser = argparse.ArgumentParser(
        prog="scsr",
        description="scsr: Report compiled smart contract sizes against the 24,576 byte deployment limit"
    )
    parser.add_argument("--version", action="version", version=f"scsr {scsr_version}")
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="Project root directory (defaults to the current directory)"
    )
    parser.add_argument(
        "detailed",
        nargs="?",
        default="false",
        help="'true' to list every contract, 'false' to hide small ones (default: false)"
    )
    parser.add_argument(
        "--build-dir",
        type=Path,
        default=None,
        help="Artifact directory relative to the root (defaults to 'build/contracts')"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output."
    )

    args = parser.parse_args()

    from .api import DEFAULT_BUILD_DIR, run_report
    from .errors import DirectoryMissingError
    from .sinks import ConsoleSink

    sink = ConsoleSink(color=not args.no_color)
    try:
        run_report(
            root=args.root,
            detailed=parse_detailed(args.detailed),
            sink=sink,
            build_dir=args.build_dir or DEFAULT_BUILD_DIR,
        )
    except DirectoryMissingError as e:
        sink.report_error(e)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
