"""Bindings generator — runs both back-ends over one IR sequence."""

from __future__ import annotations

import re

from gonode.errors import ConfigError
from gonode.generators.cpp_generator import generate_cpp
from gonode.generators.typescript_generator import generate_typescript
from gonode.ir.models import ExportedFunction, GeneratedBindings

MODULE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_module_name(module_name: str) -> str:
    """The module name becomes a C++ namespace and a TypeScript identifier."""
    if not isinstance(module_name, str) or not MODULE_NAME_RE.match(module_name):
        raise ConfigError(f"invalid addon name {module_name!r}: must be an identifier")
    return module_name


def generate_bindings(functions: list[ExportedFunction], module_name: str) -> GeneratedBindings:
    """Generate the native wrapper and the declarations together.

    Either both artifacts are returned or the first error propagates.
    """
    validate_module_name(module_name)
    return GeneratedBindings(
        native_source=generate_cpp(functions, module_name),
        declaration_source=generate_typescript(functions, module_name),
    )
