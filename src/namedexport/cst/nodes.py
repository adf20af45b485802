"""Node model for one module's top-level statements.

The tree is deliberately shallow: only the shapes the converters match on
(declarations, default exports, imports and the wrapper call) get their own
node classes. Everything else is a RawStatement or RawExpression carrying its
source text.

Every node parsed from source keeps its original text in ``original``; the
printer reprints that text verbatim until a converter clears it via
``touch()`` or builds a fresh node.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

N = TypeVar("N", bound="Statement")


@dataclass(eq=False)
class Comment:
    """A source comment attached to a statement.

    Attributes:
        text: Comment text including its delimiters ("// ..." or "/* ... */")
        trailing: False for comments above the statement, True for comments
            after it (same line, or at the end of the file)
        separator: Whitespace between the comment and its neighbour; after the
            comment when leading, before it when trailing
        line: 1-based source line, None for synthesized comments
    """

    text: str
    trailing: bool = False
    separator: str = "\n"
    line: int | None = None


@dataclass(eq=False, kw_only=True)
class Node:
    original: str | None = None
    line: int | None = None

    def touch(self) -> None:
        """Mark the node as modified so the printer renders it from fields."""
        self.original = None


@dataclass(eq=False, kw_only=True)
class Statement(Node):
    comments: list[Comment] = field(default_factory=list)
    gap: str = ""

    @property
    def leading_comments(self) -> list[Comment]:
        return [c for c in self.comments if not c.trailing]

    @property
    def trailing_comments(self) -> list[Comment]:
        return [c for c in self.comments if c.trailing]


# Expressions


@dataclass(eq=False)
class Identifier(Node):
    name: str


@dataclass(eq=False)
class MemberExpression(Node):
    object: Expression
    property: Identifier


@dataclass(eq=False)
class CallExpression(Node):
    callee: Expression
    arguments: list[Expression] = field(default_factory=list)


@dataclass(eq=False)
class FunctionExpression(Node):
    name: str | None
    parameters: str
    body: str
    is_async: bool = False
    is_generator: bool = False
    type_parameters: str = ""
    return_type: str = ""


@dataclass(eq=False)
class ClassExpression(Node):
    name: str | None
    body: str
    heritage: str = ""
    type_parameters: str = ""
    decorators: list[str] = field(default_factory=list)


@dataclass(eq=False)
class RawExpression(Node):
    text: str


# Declarations


@dataclass(eq=False)
class FunctionDeclaration(Statement):
    name: str
    parameters: str
    body: str
    is_async: bool = False
    is_generator: bool = False
    type_parameters: str = ""
    return_type: str = ""


@dataclass(eq=False)
class ClassDeclaration(Statement):
    name: str
    body: str
    heritage: str = ""
    type_parameters: str = ""
    decorators: list[str] = field(default_factory=list)


@dataclass(eq=False)
class VariableDeclarator(Node):
    name: str | None
    init: Expression | None = None
    type_annotation: str = ""


@dataclass(eq=False)
class VariableDeclaration(Statement):
    kind: str
    declarations: list[VariableDeclarator] = field(default_factory=list)
    semicolon: bool | None = None


# Module-level statements


@dataclass(eq=False)
class ExportDefaultDeclaration(Statement):
    declaration: ExportDefaultPayload
    semicolon: bool | None = None


@dataclass(eq=False)
class ExportNamedDeclaration(Statement):
    declaration: Declaration


@dataclass(eq=False)
class ImportDefaultSpecifier(Node):
    local: str


@dataclass(eq=False)
class ImportNamespaceSpecifier(Node):
    local: str


@dataclass(eq=False)
class ImportSpecifier(Node):
    imported: str
    local: str


@dataclass(eq=False)
class StringLiteral(Node):
    value: str
    raw: str


@dataclass(eq=False)
class ImportDeclaration(Statement):
    specifiers: list[ImportSpecifierLike]
    source: StringLiteral
    type_only: bool = False
    semicolon: bool | None = None


@dataclass(eq=False)
class RawStatement(Statement):
    text: str


Expression = (
    Identifier
    | MemberExpression
    | CallExpression
    | FunctionExpression
    | ClassExpression
    | RawExpression
)
Declaration = FunctionDeclaration | VariableDeclaration | ClassDeclaration
ExportDefaultPayload = (
    Identifier | CallExpression | FunctionDeclaration | ClassDeclaration | RawExpression
)
ImportSpecifierLike = ImportDefaultSpecifier | ImportNamespaceSpecifier | ImportSpecifier


@dataclass(eq=False)
class Module:
    """One file's top-level statements.

    Attributes:
        statements: Top-level statements in source order
        tail: Text after the last statement (usually the final newline)
        source: The text the module was parsed from
    """

    statements: list[Statement] = field(default_factory=list)
    tail: str = ""
    source: str = ""

    def find(
        self,
        node_type: type[N],
        predicate: Callable[[N], bool] | None = None,
    ) -> list[N]:
        """Return top-level statements of ``node_type`` matching ``predicate``."""
        return [
            statement
            for statement in self.statements
            if isinstance(statement, node_type)
            and (predicate is None or predicate(statement))
        ]

    def index(self, statement: Statement) -> int:
        for i, candidate in enumerate(self.statements):
            if candidate is statement:
                return i
        raise ValueError(f"{type(statement).__name__} is not a statement of this module")

    def replace(self, old: Statement, new: Statement) -> None:
        self.statements[self.index(old)] = new

    def remove(self, statement: Statement) -> None:
        """Delete ``statement``; a new first statement inherits its leading gap."""
        i = self.index(statement)
        del self.statements[i]
        if i == 0 and self.statements:
            self.statements[0].gap = statement.gap
