"""Convert ``export default function name() {}`` into ``export function name() {}``."""

from __future__ import annotations

from namedexport.cst.comments import replace_with_comments
from namedexport.cst.diagnostics import Diagnostics
from namedexport.cst.nodes import (
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    FunctionDeclaration,
    Module,
)


def convert_function_export(module: Module, diagnostics: Diagnostics) -> bool:
    """Rewrite a default-exported named function as a named export.

    A function name that does not occur in the file path is reported as a
    ``filename-mismatch`` diagnostic; the rewrite happens regardless.
    """
    exports = module.find(
        ExportDefaultDeclaration,
        lambda n: isinstance(n.declaration, FunctionDeclaration),
    )
    if len(exports) != 1:
        return False

    export = exports[0]
    function = export.declaration
    assert isinstance(function, FunctionDeclaration)
    replace_with_comments(module, export, ExportNamedDeclaration(declaration=function))
    diagnostics.check_filename(function.name, "function", export.line)
    return True
