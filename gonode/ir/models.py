"""IR data models — the language-neutral shape of an exported function.

These records are built once by the extractor and read by the C++ and
TypeScript generators. They are frozen: generators never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoundaryType(Enum):
    """Primitive categories that can cross the Go / C++ / JavaScript boundary."""

    TEXT = "text"  # *C.char <-> JavaScript string
    NUMERIC = "numeric"  # Go ints and floats <-> JavaScript number


@dataclass(frozen=True)
class IRParameter:
    """A parameter of an exported function."""

    name: str
    type: BoundaryType


@dataclass(frozen=True)
class ExportedFunction:
    """A Go function flagged with an ``//export`` comment."""

    name: str
    parameters: tuple[IRParameter, ...] = ()
    return_type: BoundaryType | None = None  # None means no result
    documentation: str = ""
    source_file: str = ""
    line: int = 0

    @property
    def js_name(self) -> str:
        """Name exposed to JavaScript: first letter lower-cased."""
        return self.name[:1].lower() + self.name[1:]

    @property
    def qualified_name(self) -> str:
        return f"{self.source_file}:{self.name}"

    @property
    def arity(self) -> int:
        return len(self.parameters)


@dataclass(frozen=True)
class GeneratedBindings:
    """The two artifacts generated from one IR sequence."""

    native_source: str
    declaration_source: str
