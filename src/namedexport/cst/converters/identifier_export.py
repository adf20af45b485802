"""Convert ``export default Identifier`` into a named export of its declaration."""

from __future__ import annotations

import logging

from namedexport.cst.comments import replace_with_comments
from namedexport.cst.diagnostics import Diagnostics
from namedexport.cst.locator import Found, find_declaration
from namedexport.cst.nodes import (
    ClassDeclaration,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    FunctionDeclaration,
    Identifier,
    Module,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)

NOUNS = {
    FunctionDeclaration: "function",
    VariableDeclaration: "variable",
    ClassDeclaration: "class",
}


def convert_identifier_export(module: Module, diagnostics: Diagnostics) -> bool:
    """Export the declaration of a default-exported identifier by name.

    The declaration is wrapped in a named export in place and the default
    export statement is deleted. Comments on the deleted statement have
    nowhere to go; they are reported as a ``dropped-comment`` diagnostic.

    Returns:
        True if the module was rewritten
    """
    exports = module.find(ExportDefaultDeclaration, lambda n: isinstance(n.declaration, Identifier))
    if len(exports) != 1:
        return False

    export = exports[0]
    assert isinstance(export.declaration, Identifier)
    name = export.declaration.name
    result = find_declaration(module, name)
    if not isinstance(result, Found):
        logger.debug("No unique declaration for %s (%s)", name, type(result).__name__)
        return False

    declaration = result.declaration
    line = declaration.line
    replace_with_comments(module, declaration, ExportNamedDeclaration(declaration=declaration))

    if export.comments:
        diagnostics.warn(
            "dropped-comment",
            f"Deleted a trailing comment in {diagnostics.filepath}!",
            export.comments[0].line,
        )
    module.remove(export)

    diagnostics.check_filename(name, NOUNS[type(declaration)], line)
    logger.debug("Exported %s by name", name)
    return True
