"""Declaration locator.

Finds the unique top-level declaration bound to a name. Lookups return
Found, NotFound or Ambiguous; converters treat anything but Found as
"leave the file alone".
"""

from __future__ import annotations

from dataclasses import dataclass

from namedexport.cst.nodes import (
    ClassDeclaration,
    Declaration,
    FunctionDeclaration,
    Module,
    VariableDeclaration,
)


@dataclass(frozen=True)
class Found:
    declaration: Declaration


@dataclass(frozen=True)
class NotFound:
    name: str


@dataclass(frozen=True)
class Ambiguous:
    name: str
    count: int


LookupResult = Found | NotFound | Ambiguous


def _binds_variable(node: VariableDeclaration, name: str) -> bool:
    return len(node.declarations) == 1 and node.declarations[0].name == name


def find_declaration(module: Module, name: str) -> LookupResult:
    """Find the top-level declaration bound to ``name``.

    Categories are searched in order function, single-declarator variable,
    class; the first category with exactly one match wins. Declarations
    already wrapped in an ``export`` are not candidates.

    Args:
        module: Module to search
        name: Identifier name to look up

    Returns:
        Found with the declaration, Ambiguous if a category matched more than
        once and none matched exactly once, NotFound otherwise
    """
    categories: list[list[Declaration]] = [
        list(module.find(FunctionDeclaration, lambda n: n.name == name)),
        list(module.find(VariableDeclaration, lambda n: _binds_variable(n, name))),
        list(module.find(ClassDeclaration, lambda n: n.name == name)),
    ]
    most = 0
    for matches in categories:
        if len(matches) == 1:
            return Found(matches[0])
        most = max(most, len(matches))
    if most > 1:
        return Ambiguous(name, most)
    return NotFound(name)
