"""Shared tree-sitter parsing utilities.

Provides parse_file and parse_source as the entry points for all
transforms in the namedexport.cst package. The tree-sitter syntax tree is
folded into the shallow node model from namedexport.cst.nodes.
"""

from __future__ import annotations

from pathlib import Path

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser

from namedexport.cst.nodes import (
    CallExpression,
    ClassDeclaration,
    Comment,
    ExportDefaultDeclaration,
    ExportDefaultPayload,
    Expression,
    FunctionDeclaration,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    ImportSpecifierLike,
    MemberExpression,
    Module,
    RawExpression,
    RawStatement,
    Statement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)
from namedexport.errors import SourceParseError

TYPESCRIPT_LANGUAGE = Language(tstypescript.language_typescript())
TSX_LANGUAGE = Language(tstypescript.language_tsx())

# Plain .ts can't use the TSX grammar: `<T>value` casts would parse as JSX.
TYPESCRIPT_SUFFIXES = frozenset({".ts", ".mts", ".cts"})

FUNCTION_DECLARATION_TYPES = frozenset(
    {"function_declaration", "generator_function_declaration"}
)
FUNCTION_EXPRESSION_TYPES = frozenset(
    {"function_expression", "function", "generator_function"}
)
VARIABLE_DECLARATION_TYPES = frozenset({"lexical_declaration", "variable_declaration"})
# Import forms whose extra syntax the rebuilt statement could not carry.
UNSUPPORTED_IMPORT_CHILDREN = frozenset(
    {"import_require_clause", "import_attribute", "typeof"}
)


def language_for(filepath: str | None) -> Language:
    """Pick the grammar for a file path (TSX covers JS and JSX too)."""
    if filepath and Path(filepath).suffix in TYPESCRIPT_SUFFIXES:
        return TYPESCRIPT_LANGUAGE
    return TSX_LANGUAGE


def parse_file(path: str) -> Module:
    """Parse a JavaScript/TypeScript source file into a Module.

    Args:
        path: Absolute or relative path to a source file

    Returns:
        Module whose untouched statements print back byte for byte

    Raises:
        FileNotFoundError: If the file does not exist
        SourceParseError: If the file cannot be parsed
    """
    with open(path, encoding="utf-8") as f:
        source = f.read()
    return parse_source(source, path)


def parse_source(code: str, filepath: str | None = None) -> Module:
    """Parse JavaScript/TypeScript source code string into a Module.

    Args:
        code: Source code as a string
        filepath: Optional path, used only to pick the grammar

    Returns:
        Module whose untouched statements print back byte for byte

    Raises:
        SourceParseError: If the code cannot be parsed

    Example:
        >>> module = parse_source("export default greet;\\n")
        >>> type(module.statements[0]).__name__
        'ExportDefaultDeclaration'
    """
    source = code.encode("utf-8")
    tree = Parser(language_for(filepath)).parse(source)
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        kind = "Missing token" if bad.is_missing else "Syntax error"
        raise SourceParseError(kind, bad.start_point.row + 1, bad.start_point.column + 1)
    return _ModuleBuilder(source).build(tree.root_node)


def _first_error(node: Node) -> Node:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error(child)
    return node


class _ModuleBuilder:
    """Folds the tree-sitter program node into a Module.

    Comment attachment: a comment starting on the row where the previous
    statement ends trails that statement; every other comment leads the next
    statement; comments after the last statement trail it.
    """

    def __init__(self, source: bytes) -> None:
        self.source = source

    def text(self, node: Node) -> str:
        return self.span(node.start_byte, node.end_byte)

    def span(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def field_text(self, node: Node, name: str) -> str:
        child = node.child_by_field_name(name)
        return self.text(child) if child is not None else ""

    def build(self, root: Node) -> Module:
        statements: list[Statement] = []
        pending: list[Node] = []
        cursor = 0
        last: Statement | None = None
        last_row = -1

        for child in root.children:
            if child.type == "comment":
                if last is not None and not pending and child.start_point.row == last_row:
                    last.comments.append(
                        Comment(
                            text=self.text(child),
                            trailing=True,
                            separator=self.span(cursor, child.start_byte),
                            line=child.start_point.row + 1,
                        )
                    )
                    cursor = child.end_byte
                    last_row = child.end_point.row
                else:
                    pending.append(child)
                continue

            statement = self.statement(child)
            first = pending[0] if pending else child
            statement.gap = self.span(cursor, first.start_byte)
            for comment, following in zip(pending, [*pending[1:], child]):
                statement.comments.append(
                    Comment(
                        text=self.text(comment),
                        separator=self.span(comment.end_byte, following.start_byte),
                        line=comment.start_point.row + 1,
                    )
                )
            pending = []
            statements.append(statement)
            last = statement
            cursor = child.end_byte
            last_row = child.end_point.row

        if last is not None:
            for comment in pending:
                last.comments.append(
                    Comment(
                        text=self.text(comment),
                        trailing=True,
                        separator=self.span(cursor, comment.start_byte),
                        line=comment.start_point.row + 1,
                    )
                )
                cursor = comment.end_byte

        return Module(
            statements=statements,
            tail=self.span(cursor, len(self.source)),
            source=self.source.decode("utf-8"),
        )

    def statement(self, node: Node) -> Statement:
        built: Statement | None = None
        if node.type in FUNCTION_DECLARATION_TYPES:
            built = self.function(node)
        elif node.type == "class_declaration":
            built = self.class_(node)
        elif node.type in VARIABLE_DECLARATION_TYPES:
            built = self.variable(node)
        elif node.type == "export_statement":
            built = self.export(node)
        elif node.type == "import_statement":
            built = self.import_(node)

        if built is None:
            built = RawStatement(text=self.text(node))
        built.original = self.text(node)
        built.line = node.start_point.row + 1
        return built

    def function(self, node: Node) -> FunctionDeclaration:
        return FunctionDeclaration(
            name=self.field_text(node, "name"),
            parameters=self.field_text(node, "parameters"),
            body=self.field_text(node, "body"),
            is_async=any(c.type == "async" for c in node.children),
            is_generator=any(c.type == "*" for c in node.children),
            type_parameters=self.field_text(node, "type_parameters"),
            return_type=self.field_text(node, "return_type"),
            original=self.text(node),
            line=node.start_point.row + 1,
        )

    def class_(self, node: Node) -> ClassDeclaration:
        heritage = next((c for c in node.children if c.type == "class_heritage"), None)
        return ClassDeclaration(
            name=self.field_text(node, "name"),
            body=self.field_text(node, "body"),
            heritage=self.text(heritage) if heritage is not None else "",
            type_parameters=self.field_text(node, "type_parameters"),
            decorators=[self.text(c) for c in node.children if c.type == "decorator"],
            original=self.text(node),
            line=node.start_point.row + 1,
        )

    def variable(self, node: Node) -> VariableDeclaration:
        declarations = []
        for child in node.named_children:
            if child.type != "variable_declarator":
                continue
            name = child.child_by_field_name("name")
            value = child.child_by_field_name("value")
            declarations.append(
                VariableDeclarator(
                    name=self.text(name) if name is not None and name.type == "identifier" else None,
                    init=RawExpression(text=self.text(value), original=self.text(value))
                    if value is not None
                    else None,
                    type_annotation=self.field_text(child, "type"),
                    original=self.text(child),
                )
            )
        return VariableDeclaration(
            kind=node.children[0].type,
            declarations=declarations,
            semicolon=self.text(node).endswith(";"),
        )

    def export(self, node: Node) -> ExportDefaultDeclaration | None:
        if not any(c.type == "default" for c in node.children):
            return None
        declaration = node.child_by_field_name("declaration")
        value = node.child_by_field_name("value")
        payload: ExportDefaultPayload
        if declaration is not None and declaration.type in FUNCTION_DECLARATION_TYPES:
            payload = self.function(declaration)
        elif declaration is not None and declaration.type == "class_declaration":
            payload = self.class_(declaration)
        elif (
            value is not None
            and value.type in FUNCTION_EXPRESSION_TYPES
            and value.child_by_field_name("name") is not None
        ):
            # `export default function name() {}` is a declaration in ESTree.
            payload = self.function(value)
        elif value is not None:
            payload = self.expression(value)
        else:
            target = declaration if declaration is not None else node
            payload = RawExpression(text=self.text(target), original=self.text(target))
        return ExportDefaultDeclaration(
            declaration=payload,
            semicolon=self.text(node).endswith(";"),
        )

    def expression(self, node: Node) -> Expression:
        if node.type == "identifier":
            return Identifier(name=self.text(node), original=self.text(node))
        if node.type == "call_expression" and node.child_by_field_name("type_arguments") is None:
            callee = node.child_by_field_name("function")
            arguments = node.child_by_field_name("arguments")
            if callee is not None and arguments is not None:
                return CallExpression(
                    callee=self.member(callee) or self.expression(callee),
                    arguments=[
                        self.expression(a) for a in arguments.named_children if a.type != "comment"
                    ],
                    original=self.text(node),
                )
        return RawExpression(text=self.text(node), original=self.text(node))

    def member(self, node: Node) -> MemberExpression | None:
        if node.type != "member_expression":
            return None
        obj = node.child_by_field_name("object")
        prop = node.child_by_field_name("property")
        if obj is None or prop is None or obj.type != "identifier":
            return None
        if prop.type != "property_identifier":
            return None
        return MemberExpression(
            object=Identifier(name=self.text(obj), original=self.text(obj)),
            property=Identifier(name=self.text(prop), original=self.text(prop)),
            original=self.text(node),
        )

    def import_(self, node: Node) -> ImportDeclaration | None:
        source = node.child_by_field_name("source")
        if source is None or source.type != "string":
            return None
        specifiers: list[ImportSpecifierLike] = []
        type_only = False
        for child in node.children:
            if child.type in UNSUPPORTED_IMPORT_CHILDREN:
                return None
            if child.type == "type":
                type_only = True
            elif child.type == "import_clause":
                specifiers = self.import_clause(child)
        raw = self.text(source)
        return ImportDeclaration(
            specifiers=specifiers,
            source=StringLiteral(value=raw[1:-1], raw=raw, original=raw),
            type_only=type_only,
            semicolon=self.text(node).endswith(";"),
        )

    def import_clause(self, node: Node) -> list[ImportSpecifierLike]:
        specifiers: list[ImportSpecifierLike] = []
        for child in node.named_children:
            if child.type == "identifier":
                specifiers.append(
                    ImportDefaultSpecifier(local=self.text(child), original=self.text(child))
                )
            elif child.type == "namespace_import":
                local = next(c for c in child.named_children if c.type == "identifier")
                specifiers.append(
                    ImportNamespaceSpecifier(local=self.text(local), original=self.text(child))
                )
            elif child.type == "named_imports":
                for specifier in child.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    imported = self.field_text(specifier, "name")
                    alias = self.field_text(specifier, "alias")
                    specifiers.append(
                        ImportSpecifier(
                            imported=imported,
                            local=alias or imported,
                            original=self.text(specifier),
                        )
                    )
        return specifiers
