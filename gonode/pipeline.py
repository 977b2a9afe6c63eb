"""Pipeline driver — from configuration to written addon sources.

Steps:
1. Discover Go files from the configured glob patterns
2. Extract exported functions from every file (first failure aborts the run)
3. Generate the C++ wrapper and the TypeScript declarations in memory
4. Clear the output directory and write both artifacts

Nothing is written unless every file was extracted and both generators
succeeded.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from gonode.generators.bindings_generator import generate_bindings
from gonode.ir.go_parser import parse_go_file
from gonode.ir.models import ExportedFunction, GeneratedBindings
from gonode.utils.config import GonodeConfig
from gonode.utils.file_scanner import discover_source_files
from gonode.utils.reporter import Reporter

OUTPUT_SUBDIR = "gonode"
NATIVE_EXTENSION = ".cc"
DECLARATION_EXTENSION = ".ts"


@dataclass
class PipelineResult:
    """What a pipeline run found and wrote."""

    source_files: list[Path] = field(default_factory=list)
    functions: list[ExportedFunction] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)

    @property
    def generated(self) -> bool:
        return bool(self.written)


def output_directory(project_dir: str | Path, config: GonodeConfig) -> Path:
    return Path(project_dir) / config.output_dir / OUTPUT_SUBDIR


def extract_all(files: list[Path], reporter: Reporter | None = None) -> list[ExportedFunction]:
    """Extract exported functions from *files*, concatenated in file order."""
    reporter = reporter or Reporter()
    functions: list[ExportedFunction] = []
    for path in files:
        found = parse_go_file(path)
        reporter.info(f"{path}: {len(found)} exported function(s)")
        functions.extend(found)
    return functions


def write_bindings(
    out_dir: Path, module_name: str, bindings: GeneratedBindings
) -> list[Path]:
    """Replace the contents of *out_dir* with the two generated files."""
    out_dir.mkdir(parents=True, exist_ok=True)
    for item in sorted(out_dir.iterdir()):
        if item.is_dir() and not item.is_symlink():
            shutil.rmtree(item)
        else:
            item.unlink()

    native_path = out_dir / f"{module_name}{NATIVE_EXTENSION}"
    declaration_path = out_dir / f"{module_name}{DECLARATION_EXTENSION}"
    native_path.write_text(bindings.native_source, encoding="utf-8")
    declaration_path.write_text(bindings.declaration_source, encoding="utf-8")
    return [native_path, declaration_path]


def run_pipeline(
    project_dir: str | Path,
    config: GonodeConfig,
    reporter: Reporter | None = None,
) -> PipelineResult:
    """Generate the addon sources for the project at *project_dir*.

    Raises:
        GonodeError: any extraction or generation failure; nothing is written.
    """
    reporter = reporter or Reporter()
    project_dir = Path(project_dir)
    result = PipelineResult()

    result.source_files = discover_source_files(project_dir, config.files)
    if not result.source_files:
        reporter.warning(f"No files match {', '.join(config.files)}")
    else:
        reporter.info(f"Parsing {len(result.source_files)} file(s)")

    result.functions = extract_all(result.source_files, reporter)
    if not result.functions:
        reporter.warning("No exported functions found")
        return result

    reporter.info(
        "Generating bindings for: " + ", ".join(f.name for f in result.functions)
    )
    bindings = generate_bindings(result.functions, config.name)

    out_dir = output_directory(project_dir, config)
    result.written = write_bindings(out_dir, config.name, bindings)
    for path in result.written:
        reporter.success(f"Wrote {path}")
    return result
