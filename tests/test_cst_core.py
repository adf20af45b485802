"""Tests for CST core parse utilities."""

from pathlib import Path

import pytest

pytest.importorskip("tree_sitter")
pytest.importorskip("tree_sitter_typescript")

from namedexport.cst.core import (  # noqa: E402
    TSX_LANGUAGE,
    TYPESCRIPT_LANGUAGE,
    language_for,
    parse_file,
    parse_source,
)
from namedexport.cst.nodes import (  # noqa: E402
    CallExpression,
    ClassDeclaration,
    ExportDefaultDeclaration,
    FunctionDeclaration,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    MemberExpression,
    RawExpression,
    RawStatement,
    VariableDeclaration,
)
from namedexport.cst.printer import print_module  # noqa: E402
from namedexport.errors import SourceParseError  # noqa: E402

FIXTURES = Path(__file__).parent / "fixtures" / "exports"


def test_language_for_typescript_suffixes():
    """.ts/.mts/.cts files use the TypeScript grammar."""
    assert language_for("a/b.ts") is TYPESCRIPT_LANGUAGE
    assert language_for("a/b.mts") is TYPESCRIPT_LANGUAGE
    assert language_for("a/b.d.ts") is TYPESCRIPT_LANGUAGE


def test_language_for_everything_else_uses_tsx():
    """JS, JSX, TSX and unknown paths use the TSX grammar."""
    assert language_for("a/b.tsx") is TSX_LANGUAGE
    assert language_for("a/b.js") is TSX_LANGUAGE
    assert language_for(None) is TSX_LANGUAGE


def test_parse_source_empty():
    """parse_source should handle empty strings."""
    module = parse_source("")
    assert module.statements == []
    assert module.tail == ""


def test_parse_source_function_declaration():
    """Function declarations keep name, parameters and body text."""
    module = parse_source("function greet(n){return n;}\n")
    (node,) = module.statements
    assert isinstance(node, FunctionDeclaration)
    assert node.name == "greet"
    assert node.parameters == "(n)"
    assert node.body == "{return n;}"
    assert node.is_async is False
    assert node.line == 1


def test_parse_source_typescript_function_parts():
    """Type parameters and return type are kept separately from parameters."""
    module = parse_source(
        "async function load<T>(id: T): Promise<T> {\n  return id;\n}\n", "load.ts"
    )
    (node,) = module.statements
    assert isinstance(node, FunctionDeclaration)
    assert node.is_async is True
    assert node.type_parameters == "<T>"
    assert node.parameters == "(id: T)"
    assert node.return_type == ": Promise<T>"


def test_parse_source_class_declaration():
    """Class declarations keep heritage and body text."""
    module = parse_source("class Widget extends Base {\n  render() {}\n}\n")
    (node,) = module.statements
    assert isinstance(node, ClassDeclaration)
    assert node.name == "Widget"
    assert node.heritage == "extends Base"
    assert node.body.startswith("{") and node.body.endswith("}")


def test_parse_source_variable_declaration():
    """Lexical declarations record kind and declarator names."""
    module = parse_source("const a = 1, b = 2;\nlet { c } = d;\n")
    first, second = module.statements
    assert isinstance(first, VariableDeclaration)
    assert first.kind == "const"
    assert [d.name for d in first.declarations] == ["a", "b"]
    assert isinstance(second, VariableDeclaration)
    # Destructuring patterns bind no single name
    assert second.declarations[0].name is None


def test_parse_source_export_default_identifier():
    module = parse_source("export default greet;\n")
    (node,) = module.statements
    assert isinstance(node, ExportDefaultDeclaration)
    assert isinstance(node.declaration, Identifier)
    assert node.declaration.name == "greet"
    assert node.semicolon is True


def test_parse_source_export_default_wrapper_call():
    module = parse_source("export default Scrivito.connect(Widget);\n")
    (node,) = module.statements
    assert isinstance(node, ExportDefaultDeclaration)
    call = node.declaration
    assert isinstance(call, CallExpression)
    assert isinstance(call.callee, MemberExpression)
    assert call.callee.object.name == "Scrivito"
    assert call.callee.property.name == "connect"
    assert [type(a) for a in call.arguments] == [Identifier]


def test_parse_source_export_default_function():
    module = parse_source("export default function greet(n) {\n  return n;\n}\n")
    (node,) = module.statements
    assert isinstance(node, ExportDefaultDeclaration)
    assert isinstance(node.declaration, FunctionDeclaration)
    assert node.declaration.name == "greet"


def test_parse_source_export_default_anonymous_function_is_raw():
    """Anonymous default functions have no name to export."""
    module = parse_source("export default function () {}\n")
    (node,) = module.statements
    assert isinstance(node, ExportDefaultDeclaration)
    assert isinstance(node.declaration, RawExpression)


def test_parse_source_named_export_is_raw():
    """Only default exports get a structured node."""
    module = parse_source("export const a = 1;\nexport { a as b };\n")
    assert all(isinstance(s, RawStatement) for s in module.statements)


def test_parse_source_import_specifiers():
    module = parse_source('import A, { b, c as d } from "./x";\nimport * as ns from "y";\n')
    first, second = module.statements
    assert isinstance(first, ImportDeclaration)
    assert [type(s) for s in first.specifiers] == [
        ImportDefaultSpecifier,
        ImportSpecifier,
        ImportSpecifier,
    ]
    assert first.specifiers[2].imported == "c"
    assert first.specifiers[2].local == "d"
    assert first.source.value == "./x"
    assert first.source.raw == '"./x"'
    assert isinstance(second, ImportDeclaration)
    assert isinstance(second.specifiers[0], ImportNamespaceSpecifier)


def test_parse_source_type_only_import():
    module = parse_source('import type Props from "./Props";\n', "a.ts")
    (node,) = module.statements
    assert isinstance(node, ImportDeclaration)
    assert node.type_only is True


def test_parse_source_leading_comments_attach_to_next_statement():
    module = parse_source("// one\n\n/* two */\nfunction f() {}\n")
    (node,) = module.statements
    assert [c.text for c in node.leading_comments] == ["// one", "/* two */"]
    assert node.comments[0].separator == "\n\n"
    assert node.comments[1].separator == "\n"
    assert node.trailing_comments == []


def test_parse_source_same_line_comment_trails_previous_statement():
    module = parse_source("export default greet; // keep\nfunction g() {}\n")
    first, second = module.statements
    assert [c.text for c in first.trailing_comments] == ["// keep"]
    assert first.trailing_comments[0].separator == " "
    assert second.comments == []


def test_parse_source_end_of_file_comment_trails_last_statement():
    module = parse_source("export default greet;\n\n// the end\n")
    (node,) = module.statements
    assert [c.text for c in node.trailing_comments] == ["// the end"]
    assert module.tail == "\n"


def test_parse_source_invalid_syntax():
    """parse_source should raise SourceParseError with a location."""
    with pytest.raises(SourceParseError) as excinfo:
        parse_source("function (\n")
    assert excinfo.value.line >= 1
    assert excinfo.value.column >= 1


@pytest.mark.parametrize("name", sorted(p.name for p in FIXTURES.iterdir()))
def test_parse_file_preserves_content(name):
    """Printing an untouched module reproduces the file byte for byte."""
    path = str(FIXTURES / name)
    with open(path) as f:
        original = f.read()
    module = parse_file(path)
    assert print_module(module) == original


def test_parse_file_not_found():
    """parse_file should raise FileNotFoundError for missing files."""
    with pytest.raises(FileNotFoundError):
        parse_file("/nonexistent/path/file.js")
