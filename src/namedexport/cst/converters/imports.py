"""Turn default imports of sibling modules into named imports.

A relative, extensionless import source is assumed to name a file this same
tool has already converted, so its default export is now a named export with
the same name as the local binding.
"""

from __future__ import annotations

import logging
import re

from namedexport.cst.comments import replace_with_comments
from namedexport.cst.nodes import (
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    ImportSpecifierLike,
    Module,
)

logger = logging.getLogger(__name__)

EXTENSION = re.compile(r"\.\w+$", re.ASCII)


def targets_converted_module(source: str) -> bool:
    """True for "./foo" and "../foo/bar", False for "foo" or "./data.json"."""
    return source.startswith(".") and EXTENSION.search(source) is None


def _imports_default(node: ImportDeclaration) -> bool:
    if not node.specifiers or not isinstance(node.specifiers[0], ImportDefaultSpecifier):
        return False
    # `import X, * as Y` has no named-import equivalent.
    return not any(isinstance(s, ImportNamespaceSpecifier) for s in node.specifiers)


def _to_named(specifier: ImportSpecifierLike) -> ImportSpecifierLike:
    if isinstance(specifier, ImportDefaultSpecifier):
        return ImportSpecifier(imported=specifier.local, local=specifier.local)
    return specifier


def normalize_imports(module: Module) -> int:
    """Rewrite ``import X from "./x"`` as ``import { X } from "./x"``.

    Returns:
        Number of import statements rewritten
    """
    rewritten = 0
    for node in module.find(ImportDeclaration, _imports_default):
        if not targets_converted_module(node.source.value):
            continue
        replace_with_comments(
            module,
            node,
            ImportDeclaration(
                specifiers=[_to_named(s) for s in node.specifiers],
                source=node.source,
                type_only=node.type_only,
                semicolon=node.semicolon,
            ),
        )
        logger.debug("Rewrote default import from %s", node.source.value)
        rewritten += 1
    return rewritten
