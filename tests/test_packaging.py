"""Packaging regression tests.

Tests that verify the source layout and the installed package surface.
"""

from pathlib import Path


def test_source_layout():
    """Test that the src/ layout holds only the scsr package."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_scsr = repo_root / "src" / "scsr"

    assert src_scsr.exists(), "scsr package should exist in src/"
    assert (src_scsr / "kernel").exists(), "scsr.kernel should exist in src/"
    assert (src_scsr / "_internal").exists(), "scsr._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    """Test that the package and its kernel import cleanly."""
    import scsr
    import scsr.kernel.report  # noqa: F401

    # Check version: in dev mode it's "dev", in installed mode it's "1.0.0"
    assert scsr.__version__ in ("1.0.0", "dev")


def test_console_script_entry_point():
    from scsr.cli import main

    assert callable(main)
