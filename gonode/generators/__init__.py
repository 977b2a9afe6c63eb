"""Binding generators — emit addon sources from the IR.

- C++: Node.js addon wrappers that validate and convert arguments
- TypeScript: typed declarations for the addon
"""

from gonode.generators.bindings_generator import generate_bindings
from gonode.generators.cpp_generator import generate_cpp
from gonode.generators.typescript_generator import generate_typescript

__all__ = [
    "generate_bindings",
    "generate_cpp",
    "generate_typescript",
]
