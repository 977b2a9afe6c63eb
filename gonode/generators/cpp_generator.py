"""C++ generator — Node.js addon wrappers around cgo-exported Go functions.

The generated module targets the classic ``node.h`` addon API. For each IR
record it emits a ``<Name>_Func`` callback that:

1. checks the number of arguments
2. checks each argument's JavaScript type
3. converts the arguments to C values
4. calls the function exported from Go (declared in ``<module>.h``)
5. converts the result back to a JavaScript value

An ``Init`` function registers every callback and ``NODE_MODULE`` binds it to
the addon. Each construct is produced by its own template function below;
``generate_cpp`` only concatenates them in order.
"""

from __future__ import annotations

from gonode.errors import UnsupportedReturnTypeError
from gonode.ir.models import BoundaryType, ExportedFunction, IRParameter

ARG_PREFIX = "go_"
WRAPPER_SUFFIX = "_Func"
INDENT = "  "

BANNER = "// AUTO-GENERATED by gonode - DO NOT EDIT"

_JS_TYPE_NAMES = {
    BoundaryType.TEXT: "string",
    BoundaryType.NUMERIC: "number",
}

_TYPE_PREDICATES = {
    BoundaryType.TEXT: "IsString",
    BoundaryType.NUMERIC: "IsNumber",
}


def generate_cpp(functions: list[ExportedFunction], module_name: str) -> str:
    """Generate the complete addon source for *functions*."""
    lines = [BANNER]
    lines.extend(header_includes(module_name))
    lines.append("")
    lines.append(f"namespace {module_name} {{")
    lines.append("")
    lines.append("using namespace v8;")
    lines.append("using namespace node;")
    lines.append("")

    for function in functions:
        lines.extend(wrapper_function(function))
        lines.append("")

    lines.extend(init_function(functions))
    lines.append("")
    lines.append(module_directive())
    lines.append("")
    lines.append(f"}}  // namespace {module_name}")
    return "\n".join(lines) + "\n"


def header_includes(module_name: str) -> list[str]:
    # <module>.h is written by `go build -buildmode=c-archive` one level up
    return [
        f'#include "../{module_name}.h"',
        "#include <node.h>",
    ]


def wrapper_name(function: ExportedFunction) -> str:
    return function.name + WRAPPER_SUFFIX


def local_name(param: IRParameter) -> str:
    return ARG_PREFIX + param.name


def throw_type_error(message: str) -> list[str]:
    """Throw a JavaScript TypeError and leave the callback."""
    return [
        "isolate->ThrowException(Exception::TypeError(",
        f'    String::NewFromUtf8(isolate, "{message}").ToLocalChecked()));',
        "return;",
    ]


def argument_count_check(count: int) -> list[str]:
    lines = [f"if (args.Length() < {count}) {{"]
    lines.extend(INDENT + line for line in throw_type_error(
        f"Wrong number of arguments (expected {count})"
    ))
    lines.append("}")
    return lines


def argument_type_check(index: int, param: IRParameter) -> list[str]:
    predicate = _TYPE_PREDICATES[param.type]
    expected = _JS_TYPE_NAMES[param.type]
    lines = [f"if (!args[{index}]->{predicate}()) {{"]
    lines.extend(INDENT + line for line in throw_type_error(
        f"Wrong type for argument '{param.name}' (expected {expected})"
    ))
    lines.append("}")
    return lines


def argument_conversion(index: int, param: IRParameter) -> list[str]:
    name = local_name(param)
    if param.type == BoundaryType.TEXT:
        return [
            f"String::Utf8Value {name}_s(isolate, args[{index}]);",
            f"char *{name} = *{name}_s;",
        ]
    return [f"auto {name} = args[{index}].As<Number>()->Value();"]


def delegate_call(function: ExportedFunction) -> str:
    arguments = ", ".join(local_name(p) for p in function.parameters)
    call = f"{function.name}({arguments});"
    if function.return_type is None:
        return call
    return f"auto result = {call}"


def return_conversion(return_type: BoundaryType | None) -> list[str]:
    """Convert ``result`` to a JavaScript value and set it as the return value.

    Raises:
        UnsupportedReturnTypeError: no conversion rule exists for the type.
    """
    if return_type is None:
        return []
    if return_type == BoundaryType.TEXT:
        value = "String::NewFromUtf8(isolate, result, NewStringType::kNormal).ToLocalChecked()"
    elif return_type == BoundaryType.NUMERIC:
        value = "Number::New(isolate, result)"
    else:
        raise UnsupportedReturnTypeError(f"unsupported return type: {return_type!r}")
    return [
        f"auto nodeResult = {value};",
        "args.GetReturnValue().Set(nodeResult);",
    ]


def wrapper_function(function: ExportedFunction) -> list[str]:
    """Emit the ``<Name>_Func`` callback for one exported function."""
    try:
        result_lines = return_conversion(function.return_type)
    except UnsupportedReturnTypeError as err:
        err.file_path = function.source_file or None
        err.declaration = function.name
        raise

    body = [
        "Isolate *isolate = args.GetIsolate();",
        "HandleScope scope(isolate);",
        "",
        "// Check the number of arguments passed.",
    ]
    body.extend(argument_count_check(function.arity))
    for index, param in enumerate(function.parameters):
        body.extend(argument_type_check(index, param))
    body.append("")
    for index, param in enumerate(function.parameters):
        body.extend(argument_conversion(index, param))
    body.append("")
    body.append("// Call the function exported from Go.")
    body.append(delegate_call(function))
    body.extend(result_lines)

    lines = [f"void {wrapper_name(function)}(const FunctionCallbackInfo<Value> &args) {{"]
    lines.extend(INDENT + line if line else "" for line in body)
    lines.append("}")
    return lines


def init_function(functions: list[ExportedFunction]) -> list[str]:
    lines = ["void Init(Local<Object> exports) {"]
    for function in functions:
        lines.append(
            f'{INDENT}NODE_SET_METHOD(exports, "{function.js_name}", {wrapper_name(function)});'
        )
    lines.append("}")
    return lines


def module_directive() -> str:
    return "NODE_MODULE(NODE_GYP_MODULE_NAME, Init)"
