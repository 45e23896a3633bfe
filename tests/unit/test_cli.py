"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from vtuconv import __version__


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "vtuconv.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "vtuconv: VTK Unstructured Grid Converter" in result.stdout
    assert "--le" in result.stdout
    assert "--binary" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"vtuconv {__version__}" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (INPUT and OUTPUT are required)."""
    result = run_cli()
    assert result.returncode == 2
    assert "INPUT" in result.stderr


def test_cli_conflicting_endianness(icosahedron_path: Path, tmp_path: Path) -> None:
    """Test that --le and --be cannot be combined."""
    result = run_cli(str(icosahedron_path), str(tmp_path / "out.vtu"), "--le", "--be")
    assert result.returncode == 2
    assert "not allowed with argument" in result.stderr


def test_cli_convert(icosahedron_path: Path, tmp_path: Path) -> None:
    """Test converting the icosahedron to big endian."""
    output = tmp_path / "out.vtu"
    result = run_cli(str(icosahedron_path), str(output), "--be")

    assert result.returncode == 0, result.stderr
    assert "vtuconv: starting" in result.stderr
    assert "vtuconv: done" in result.stderr
    assert 'byte_order="BigEndian"' in output.read_text()


def test_cli_missing_input(tmp_path: Path) -> None:
    """Test CLI with a missing input file."""
    result = run_cli(str(tmp_path / "nonexistent.vtu"), str(tmp_path / "out.vtu"))
    assert result.returncode == 1
    assert "Cannot load VTK file" in result.stderr
    assert not (tmp_path / "out.vtu").exists()


def test_cli_main_in_process(icosahedron_path: Path, tmp_path: Path) -> None:
    """Test calling main() directly with an argument list."""
    from vtuconv.cli.main import main

    output = tmp_path / "out.vtu"
    assert main([str(icosahedron_path), str(output), "--ascii"]) == 0
    assert 'format="ascii"' in output.read_text()
