"""Report a default export that survived the converters."""

from namedexport.cst.diagnostics import Diagnostics
from namedexport.cst.nodes import ExportDefaultDeclaration, Module


def check_consistency(module: Module, diagnostics: Diagnostics) -> bool:
    """Warn if exactly one default export is left. Never rewrites anything.

    Returns:
        True if a leftover default export was reported
    """
    remaining = module.find(ExportDefaultDeclaration)
    if len(remaining) != 1:
        return False
    diagnostics.warn(
        "unmodified-default-export",
        f'Unmodified "export default" found in file {diagnostics.filepath}!',
        remaining[0].line,
    )
    return True
