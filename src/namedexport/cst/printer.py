"""Print a Module back to source text.

Nodes that still carry their ``original`` text print it verbatim, so every
region no converter touched comes back byte for byte. Modified and
synthesized nodes are rendered from their fields.
"""

from __future__ import annotations

from namedexport.config import PrintOptions
from namedexport.cst.nodes import (
    CallExpression,
    ClassDeclaration,
    ClassExpression,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    MemberExpression,
    Module,
    Node,
    RawExpression,
    RawStatement,
    Statement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)


def print_module(module: Module, options: PrintOptions | None = None) -> str:
    """Render ``module`` to source text.

    Args:
        module: Module to print (possibly mutated by converters)
        options: Formatting for rebuilt statements, defaults to PrintOptions()

    Returns:
        Source text; unchanged statements keep their original bytes
    """
    printer = _Printer(options or PrintOptions())
    return "".join(printer.statement(s) for s in module.statements) + module.tail


def print_node(node: Node, options: PrintOptions | None = None) -> str:
    """Render a single node without its comments or surrounding layout."""
    return _Printer(options or PrintOptions()).render(node)


class _Printer:
    def __init__(self, options: PrintOptions) -> None:
        self.options = options

    def statement(self, node: Statement) -> str:
        parts = [node.gap]
        for comment in node.leading_comments:
            parts.append(comment.text + comment.separator)
        parts.append(self.render(node))
        for comment in node.trailing_comments:
            parts.append(comment.separator + comment.text)
        return "".join(parts)

    def semicolon(self, explicit: bool | None) -> str:
        use = self.options.semicolons if explicit is None else explicit
        return ";" if use else ""

    def render(self, node: Node) -> str:
        if node.original is not None:
            return node.original

        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, MemberExpression):
            return f"{self.render(node.object)}.{self.render(node.property)}"
        if isinstance(node, CallExpression):
            arguments = ", ".join(self.render(a) for a in node.arguments)
            return f"{self.render(node.callee)}({arguments})"
        if isinstance(node, (FunctionDeclaration, FunctionExpression)):
            return self.function(node)
        if isinstance(node, (ClassDeclaration, ClassExpression)):
            return self.class_(node)
        if isinstance(node, (RawExpression, RawStatement)):
            return node.text
        if isinstance(node, VariableDeclarator):
            init = f" = {self.render(node.init)}" if node.init is not None else ""
            return f"{node.name}{node.type_annotation}{init}"
        if isinstance(node, VariableDeclaration):
            declarations = ", ".join(self.render(d) for d in node.declarations)
            return f"{node.kind} {declarations}{self.semicolon(node.semicolon)}"
        if isinstance(node, ExportDefaultDeclaration):
            payload = node.declaration
            text = f"export default {self.render(payload)}"
            if isinstance(payload, (FunctionDeclaration, ClassDeclaration)):
                return text
            return text + self.semicolon(node.semicolon)
        if isinstance(node, ExportNamedDeclaration):
            return f"export {self.render(node.declaration)}"
        if isinstance(node, ImportDeclaration):
            return self.import_(node)
        if isinstance(node, ImportDefaultSpecifier):
            return node.local
        if isinstance(node, ImportNamespaceSpecifier):
            return f"* as {node.local}"
        if isinstance(node, ImportSpecifier):
            if node.imported == node.local:
                return node.local
            return f"{node.imported} as {node.local}"
        if isinstance(node, StringLiteral):
            return node.raw
        raise TypeError(f"Cannot print node type {type(node).__name__}")

    def function(self, node: FunctionDeclaration | FunctionExpression) -> str:
        head = "async function" if node.is_async else "function"
        if node.is_generator:
            head += "*"
        if node.name:
            head += f" {node.name}"
        return f"{head}{node.type_parameters}{node.parameters}{node.return_type} {node.body}"

    def class_(self, node: ClassDeclaration | ClassExpression) -> str:
        parts = [*node.decorators, "class"]
        if node.name:
            parts[-1] += f" {node.name}{node.type_parameters}"
        if node.heritage:
            parts.append(node.heritage)
        parts.append(node.body)
        return " ".join(parts)

    def import_(self, node: ImportDeclaration) -> str:
        clause = []
        named = []
        for specifier in node.specifiers:
            if isinstance(specifier, ImportSpecifier):
                named.append(self.render(specifier))
            else:
                clause.append(self.render(specifier))
        if named:
            inner = ", ".join(named)
            clause.append(f"{{ {inner} }}" if self.options.object_curly_spacing else f"{{{inner}}}")

        text = "import type " if node.type_only else "import "
        if clause:
            text += ", ".join(clause) + " from "
        return text + self.render(node.source) + self.semicolon(node.semicolon)
