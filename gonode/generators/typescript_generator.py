"""TypeScript generator — typed declarations for the generated addon.

Emits one interface describing every exported function, followed by a
``require`` of the native addon typed against it and a default export.
"""

from __future__ import annotations

from gonode.ir.models import BoundaryType, ExportedFunction, IRParameter

INDENT = "  "

BANNER = "// AUTO-GENERATED by gonode - DO NOT EDIT"

TS_TYPES = {
    BoundaryType.TEXT: "string",
    BoundaryType.NUMERIC: "number",
}


def generate_typescript(functions: list[ExportedFunction], module_name: str) -> str:
    """Generate the declaration module for *functions*."""
    name = interface_name(module_name)
    lines = [BANNER, f"export interface {name} {{"]
    for index, function in enumerate(functions):
        if index:
            lines.append("")
        lines.extend(INDENT + line for line in doc_comment(function.documentation))
        lines.append(INDENT + member_declaration(function))
    lines.append("}")
    lines.append("")
    lines.extend(addon_binding(module_name))
    return "\n".join(lines) + "\n"


def interface_name(module_name: str) -> str:
    return module_name[:1].upper() + module_name[1:]


def render_type(boundary_type: BoundaryType | None) -> str:
    if boundary_type is None:
        return "void"
    return TS_TYPES[boundary_type]


def render_parameter(param: IRParameter) -> str:
    return f"{param.name}: {render_type(param.type)}"


def member_declaration(function: ExportedFunction) -> str:
    params = ", ".join(render_parameter(p) for p in function.parameters)
    return f"{function.js_name}: ({params}) => {render_type(function.return_type)};"


def doc_comment(documentation: str) -> list[str]:
    """Render documentation as a JSDoc block; empty documentation renders nothing."""
    if not documentation:
        return []
    lines = ["/**"]
    for line in documentation.split("\n"):
        line = line.replace("*/", "*\\/")
        lines.append(f" * {line}" if line else " *")
    lines.append(" */")
    return lines


def addon_binding(module_name: str) -> list[str]:
    return [
        f'const addon: {interface_name(module_name)} = require("{module_name}");',
        "",
        "export default addon;",
    ]
