"""Go IR parser — builds IR records from cgo-exported Go functions.

Parses Go sources with tree-sitter's Go grammar and collects every top-level
function whose doc comment carries an ``//export`` marker. Parameter and
result types are reduced to boundary types; a single unsupported type or a
multi-valued result fails the whole file.
"""

from __future__ import annotations

from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from gonode.errors import MultipleReturnValuesError, ParseError, UnsupportedTypeError
from gonode.ir.models import BoundaryType, ExportedFunction, IRParameter
from gonode.ir.type_mapper import (
    IdentifierType,
    OtherType,
    SelectorPointerType,
    TypeExpression,
    map_type,
)

GO_LANGUAGE = Language(tree_sitter_go.language())

EXPORT_MARKER = "//export "

_PARAMETER_NODES = ("parameter_declaration", "variadic_parameter_declaration")


def parse_go_file(file_path: str | Path) -> list[ExportedFunction]:
    """Read a Go file and extract its exported functions.

    Raises:
        ParseError: the file cannot be read, is not UTF-8, or does not parse.
    """
    file_path = Path(file_path)
    try:
        source = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"not valid UTF-8 at byte {e.start}: {e.reason}", file_path=str(file_path)
        ) from e
    except OSError as e:
        raise ParseError(f"cannot read file: {e}", file_path=str(file_path)) from e
    return extract_exported_functions(source, str(file_path))


def extract_exported_functions(
    source: str, file_path: str = "<source>"
) -> list[ExportedFunction]:
    """Extract IR records for every ``//export``-marked function in *source*.

    Args:
        source: Go source text.
        file_path: Used for error messages and recorded on each IR record.

    Returns:
        The exported functions in declaration order.

    Raises:
        ParseError: the source has syntax errors.
        UnsupportedTypeError: a parameter or result type has no boundary type.
        MultipleReturnValuesError: an exported function returns several values.
    """
    tree = Parser(GO_LANGUAGE).parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise ParseError(_describe_syntax_error(root), file_path=file_path)

    functions = []
    for node, comments in _top_level_declarations(root):
        if node.type != "function_declaration":
            continue
        if not any(is_export_marker(_node_text(c)) for c in comments):
            continue
        functions.append(_parse_function(node, comments, file_path))
    return functions


def is_export_marker(comment: str) -> bool:
    return comment.strip().startswith(EXPORT_MARKER)


def _top_level_declarations(root: Node):
    """Yield each top-level declaration with its attached comment group.

    A comment group is a run of comments on consecutive lines; it is attached
    to a declaration only when it ends on the line directly above it.
    """
    group: list[Node] = []
    last_code_row = -1
    for child in root.children:
        if child.type == "comment":
            start_row = child.start_point[0]
            if start_row == last_code_row:
                # trailing comment after code on the same line
                continue
            if group and start_row > group[-1].end_point[0] + 1:
                group = []
            group.append(child)
            continue
        if not child.is_named:
            continue

        attached = []
        if group and group[-1].end_point[0] == child.start_point[0] - 1:
            attached = group
        yield child, attached
        group = []
        last_code_row = child.end_point[0]


def _parse_function(node: Node, comments: list[Node], file_path: str) -> ExportedFunction:
    name = _node_text(node.child_by_field_name("name"))
    try:
        parameters = _parse_parameters(node.child_by_field_name("parameters"))
        return_type = _parse_result(node.child_by_field_name("result"))
    except (UnsupportedTypeError, MultipleReturnValuesError) as err:
        err.file_path = file_path
        err.declaration = name
        raise

    return ExportedFunction(
        name=name,
        parameters=tuple(parameters),
        return_type=return_type,
        documentation=extract_documentation([_node_text(c) for c in comments]),
        source_file=file_path,
        line=node.start_point[0] + 1,
    )


def extract_documentation(comments: list[str]) -> str:
    """Join the non-marker comment lines into a documentation string.

    Comment syntax and surrounding whitespace are trimmed and blank lines
    dropped. The result has no trailing newline.
    """
    lines = []
    for text in comments:
        if is_export_marker(text):
            continue
        for line in _strip_comment_syntax(text.strip()):
            if line:
                lines.append(line)
    return "\n".join(lines)


def _strip_comment_syntax(text: str) -> list[str]:
    if text.startswith("//"):
        return [text[2:].strip()]
    body = text.removeprefix("/*").removesuffix("*/")
    return [line.strip().lstrip("*").strip() for line in body.splitlines()]


def _parse_parameters(parameter_list: Node) -> list[IRParameter]:
    params: list[IRParameter] = []
    for child in parameter_list.named_children:
        if child.type == "variadic_parameter_declaration":
            raise UnsupportedTypeError("..." + _node_text(child.child_by_field_name("type")))
        if child.type != "parameter_declaration":
            continue

        boundary = map_type(type_expression(child.child_by_field_name("type")))
        names = child.children_by_field_name("name")
        if not names:
            params.append(IRParameter(name=f"arg{len(params)}", type=boundary))
        for ident in names:
            params.append(IRParameter(name=_node_text(ident), type=boundary))
    return params


def _parse_result(result: Node | None) -> BoundaryType | None:
    if result is None:
        return None
    if result.type != "parameter_list":
        return map_type(type_expression(result))

    declarations = [c for c in result.named_children if c.type in _PARAMETER_NODES]
    count = sum(max(1, len(d.children_by_field_name("name"))) for d in declarations)
    if count == 0:
        return None
    if count > 1:
        raise MultipleReturnValuesError(count)

    declaration = declarations[0]
    if declaration.type == "variadic_parameter_declaration":
        raise UnsupportedTypeError("..." + _node_text(declaration.child_by_field_name("type")))
    return map_type(type_expression(declaration.child_by_field_name("type")))


def type_expression(node: Node) -> TypeExpression:
    """Classify a tree-sitter type node into a type expression."""
    if node.type == "type_identifier":
        return IdentifierType(_node_text(node))
    if node.type == "pointer_type":
        targets = [c for c in node.named_children if c.type != "comment"]
        if len(targets) == 1 and targets[0].type == "qualified_type":
            qualified = targets[0]
            return SelectorPointerType(
                package=_node_text(qualified.child_by_field_name("package")),
                name=_node_text(qualified.child_by_field_name("name")),
            )
    return OtherType(_node_text(node))


def _describe_syntax_error(root: Node) -> str:
    node = _first_error(root)
    if node is None:
        return "syntax error"
    row, column = node.start_point[0], node.start_point[1]
    what = f"missing {node.type}" if node.is_missing else "syntax error"
    return f"{what} at line {row + 1}, column {column + 1}"


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8")
