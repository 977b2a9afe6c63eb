"""Tests for the gonode command line."""

import tempfile
from pathlib import Path

from click.testing import CliRunner

from gonode import __version__
from gonode.cli import main

CONFIG = 'name: calculator\nfiles: ["go/*.go"]\noutputDirectory: build\n'

SOURCE = """package main

import "C"

// Sums up two numbers
//
//export Sum
func Sum(x, y float64) float64 {
	return x + y
}
"""


def _project(root: Path, source: str = SOURCE) -> None:
    (root / ".gonode.yaml").write_text(CONFIG)
    (root / "go").mkdir()
    (root / "go" / "calculator.go").write_text(source)


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _project(root)

        result = CliRunner().invoke(main, ["generate", "--dir", str(root)])

        assert result.exit_code == 0, result.output
        assert (root / "build" / "gonode" / "calculator.cc").exists()
        assert (root / "build" / "gonode" / "calculator.ts").exists()


def test_generate_output_override():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _project(root)

        result = CliRunner().invoke(main, ["generate", "--dir", str(root), "-o", "other"])

        assert result.exit_code == 0, result.output
        assert (root / "other" / "gonode" / "calculator.ts").exists()
        assert not (root / "build").exists()


def test_generate_failure_exits_nonzero():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _project(root, "package main\n\n//export Bad\nfunc Bad(m map[string]int) {}\n")

        result = CliRunner().invoke(main, ["generate", "--dir", str(root)])

        assert result.exit_code == 1
        assert "Bad" in result.output
        assert not (root / "build").exists()


def test_generate_reports_undecodable_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _project(root)
        (root / "go" / "calculator.go").write_bytes(b"// \xff\xfe bad\npackage main\n")

        result = CliRunner().invoke(main, ["generate", "--dir", str(root)])

        assert result.exit_code == 1
        assert "calculator.go" in result.output
        assert "UTF-8" in result.output
        assert not (root / "build").exists()


def test_generate_directory_with_brackets():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "addon[x]"
        root.mkdir()
        _project(root)

        result = CliRunner().invoke(main, ["generate", "--dir", str(root)])

        assert result.exit_code == 0, result.output
        assert "addon[x]" in result.output
        assert (root / "build" / "gonode" / "calculator.cc").exists()


def test_generate_missing_config():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = CliRunner().invoke(main, ["generate", "--dir", tmpdir])
    assert result.exit_code == 1


def test_inspect():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _project(root)

        result = CliRunner().invoke(main, ["inspect", "--dir", str(root)])

        assert result.exit_code == 0, result.output
        assert "sum" in result.output
        assert not (root / "build").exists()
