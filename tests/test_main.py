"""Smoke tests for unified entry points.

These tests assert that `python -m gnudb` and the console script
both resolve to the CLI's `main` function exposed under `gnudb.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m gnudb` path exposes a `main` callable."""
    m = import_module("gnudb.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `gnudb.ui.cli:main` and is importable."""
    m = import_module("gnudb.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_version() -> None:
    m = import_module("gnudb")
    assert m.__version__ == "0.1.0"
