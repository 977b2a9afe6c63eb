"""Tests for the C++ addon wrapper generator."""

import pytest

from gonode.errors import UnsupportedReturnTypeError
from gonode.generators.cpp_generator import (
    argument_conversion,
    argument_count_check,
    argument_type_check,
    delegate_call,
    generate_cpp,
    header_includes,
    init_function,
    module_directive,
    return_conversion,
    wrapper_function,
)
from gonode.ir.models import BoundaryType, ExportedFunction, IRParameter

SUM = ExportedFunction(
    name="Sum",
    parameters=(
        IRParameter(name="x", type=BoundaryType.NUMERIC),
        IRParameter(name="y", type=BoundaryType.NUMERIC),
    ),
    return_type=BoundaryType.NUMERIC,
    documentation="Sums up two numbers",
)

GREET = ExportedFunction(
    name="Greet",
    parameters=(IRParameter(name="name", type=BoundaryType.TEXT),),
    return_type=BoundaryType.TEXT,
)

RESET = ExportedFunction(name="Reset")


# --- Template pieces ---


def test_header_includes():
    assert header_includes("calculator") == [
        '#include "../calculator.h"',
        "#include <node.h>",
    ]


def test_argument_count_check():
    lines = argument_count_check(2)
    assert lines[0] == "if (args.Length() < 2) {"
    assert any("Wrong number of arguments (expected 2)" in line for line in lines)
    assert lines[-2].strip() == "return;"
    assert lines[-1] == "}"


def test_argument_type_check_number():
    lines = argument_type_check(1, IRParameter(name="y", type=BoundaryType.NUMERIC))
    assert lines[0] == "if (!args[1]->IsNumber()) {"
    assert any("Wrong type for argument 'y' (expected number)" in line for line in lines)
    assert "Exception::TypeError" in "\n".join(lines)


def test_argument_type_check_string():
    lines = argument_type_check(0, IRParameter(name="name", type=BoundaryType.TEXT))
    assert lines[0] == "if (!args[0]->IsString()) {"
    assert any("(expected string)" in line for line in lines)


def test_argument_conversion():
    assert argument_conversion(0, IRParameter(name="x", type=BoundaryType.NUMERIC)) == [
        "auto go_x = args[0].As<Number>()->Value();"
    ]
    assert argument_conversion(2, IRParameter(name="s", type=BoundaryType.TEXT)) == [
        "String::Utf8Value go_s_s(isolate, args[2]);",
        "char *go_s = *go_s_s;",
    ]


def test_delegate_call():
    assert delegate_call(SUM) == "auto result = Sum(go_x, go_y);"
    assert delegate_call(RESET) == "Reset();"


def test_return_conversion():
    assert return_conversion(BoundaryType.NUMERIC) == [
        "auto nodeResult = Number::New(isolate, result);",
        "args.GetReturnValue().Set(nodeResult);",
    ]
    assert return_conversion(BoundaryType.TEXT)[0] == (
        "auto nodeResult = String::NewFromUtf8(isolate, result, "
        "NewStringType::kNormal).ToLocalChecked();"
    )
    assert return_conversion(None) == []


def test_return_conversion_unknown_type():
    with pytest.raises(UnsupportedReturnTypeError):
        return_conversion("bool")


def test_init_function():
    assert init_function([SUM, GREET]) == [
        "void Init(Local<Object> exports) {",
        '  NODE_SET_METHOD(exports, "sum", Sum_Func);',
        '  NODE_SET_METHOD(exports, "greet", Greet_Func);',
        "}",
    ]


def test_module_directive():
    assert module_directive() == "NODE_MODULE(NODE_GYP_MODULE_NAME, Init)"


# --- Wrappers ---


def test_wrapper_order():
    text = "\n".join(wrapper_function(SUM))
    assert text.startswith("void Sum_Func(const FunctionCallbackInfo<Value> &args) {")
    positions = [
        text.index("args.Length() < 2"),
        text.index("!args[0]->IsNumber()"),
        text.index("!args[1]->IsNumber()"),
        text.index("auto go_x = args[0]"),
        text.index("auto go_y = args[1]"),
        text.index("auto result = Sum(go_x, go_y);"),
        text.index("Number::New(isolate, result)"),
        text.index("args.GetReturnValue().Set(nodeResult);"),
    ]
    assert positions == sorted(positions)
    assert text.endswith("}")


def test_wrapper_strings():
    text = "\n".join(wrapper_function(GREET))
    assert "String::Utf8Value go_name_s(isolate, args[0]);" in text
    assert "auto result = Greet(go_name);" in text
    assert "String::NewFromUtf8(isolate, result, NewStringType::kNormal)" in text


def test_wrapper_void():
    text = "\n".join(wrapper_function(RESET))
    assert "args.Length() < 0" in text
    assert "  Reset();" in text
    assert "GetReturnValue" not in text


def test_wrapper_reports_declaration_on_unknown_return():
    broken = ExportedFunction(name="Broken", return_type="bool", source_file="b.go")
    with pytest.raises(UnsupportedReturnTypeError) as exc_info:
        wrapper_function(broken)
    assert exc_info.value.declaration == "Broken"
    assert exc_info.value.file_path == "b.go"


# --- Whole module ---


def test_generate_empty_module():
    assert generate_cpp([], "calc") == "\n".join([
        "// AUTO-GENERATED by gonode - DO NOT EDIT",
        '#include "../calc.h"',
        "#include <node.h>",
        "",
        "namespace calc {",
        "",
        "using namespace v8;",
        "using namespace node;",
        "",
        "void Init(Local<Object> exports) {",
        "}",
        "",
        "NODE_MODULE(NODE_GYP_MODULE_NAME, Init)",
        "",
        "}  // namespace calc",
        "",
    ])


def test_generate_module_with_functions():
    code = generate_cpp([SUM, GREET], "calculator")
    assert code.count("_Func(const FunctionCallbackInfo<Value> &args)") == 2
    assert code.index("void Sum_Func") < code.index("void Greet_Func") < code.index("void Init")
    assert code.index('"sum", Sum_Func') < code.index('"greet", Greet_Func')
    assert code.rstrip().endswith("}  // namespace calculator")


def test_generate_is_deterministic():
    assert generate_cpp([SUM, GREET], "calculator") == generate_cpp([SUM, GREET], "calculator")
