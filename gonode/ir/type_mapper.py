"""Type mapping from Go type expressions to boundary types.

Go types are first classified into a closed set of expression kinds, then
mapped. Only two shapes are ever accepted:

- a bare identifier naming a signed integer or float type (``NUMERIC``)
- ``*C.char``, cgo's spelling of a C string (``TEXT``)

Everything else is rejected with ``UnsupportedTypeError``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from gonode.errors import UnsupportedTypeError
from gonode.ir.models import BoundaryType

NUMERIC_TYPES = frozenset(
    {"int", "int8", "int16", "int32", "int64", "float32", "float64"}
)

# (package, name) of pointer targets accepted as C strings
TEXT_POINTER_TYPES = frozenset({("C", "char")})

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_SELECTOR_POINTER_RE = re.compile(
    r"^\*\s*([A-Za-z_][A-Za-z0-9_]*)\s*\.\s*([A-Za-z_][A-Za-z0-9_]*)$"
)


@dataclass(frozen=True)
class IdentifierType:
    """A bare type name such as ``float64``."""

    name: str

    @property
    def raw(self) -> str:
        return self.name


@dataclass(frozen=True)
class SelectorPointerType:
    """A pointer to a package-qualified type such as ``*C.char``."""

    package: str
    name: str

    @property
    def raw(self) -> str:
        return f"*{self.package}.{self.name}"


@dataclass(frozen=True)
class OtherType:
    """Any other type expression (slice, map, interface, ...)."""

    raw: str


TypeExpression = IdentifierType | SelectorPointerType | OtherType


def parse_type_expression(raw: str) -> TypeExpression:
    """Classify a textual Go type expression."""
    text = raw.strip()
    if _IDENTIFIER_RE.match(text):
        return IdentifierType(text)
    if m := _SELECTOR_POINTER_RE.match(text):
        return SelectorPointerType(package=m.group(1), name=m.group(2))
    return OtherType(text)


def map_type(expr: TypeExpression) -> BoundaryType:
    """Map a classified type expression to its boundary type.

    Raises:
        UnsupportedTypeError: the expression is outside the supported set.
    """
    if isinstance(expr, IdentifierType):
        if expr.name in NUMERIC_TYPES:
            return BoundaryType.NUMERIC
        raise UnsupportedTypeError(expr.raw)
    elif isinstance(expr, SelectorPointerType):
        if (expr.package, expr.name) in TEXT_POINTER_TYPES:
            return BoundaryType.TEXT
        raise UnsupportedTypeError(expr.raw)
    elif isinstance(expr, OtherType):
        raise UnsupportedTypeError(expr.raw)
    raise TypeError(f"not a type expression: {expr!r}")


def map_type_string(raw: str) -> BoundaryType:
    """Classify and map a textual Go type in one step."""
    return map_type(parse_type_expression(raw))
