"""Convert ``export default Namespace.method(Identifier)``.

The wrapped declaration is rebuilt as
``const Identifier = Namespace.method(<declaration as expression>)`` and the
default export is pointed at the bare identifier, which leaves a shape the
identifier converter handles next.
"""

from __future__ import annotations

import logging

from namedexport.config import DEFAULT_WRAPPER_METHOD, DEFAULT_WRAPPER_NAMESPACE
from namedexport.cst.comments import replace_with_comments
from namedexport.cst.locator import Found, find_declaration
from namedexport.cst.nodes import (
    CallExpression,
    ClassDeclaration,
    ClassExpression,
    Declaration,
    ExportDefaultDeclaration,
    ExportDefaultPayload,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    MemberExpression,
    Module,
    VariableDeclaration,
    VariableDeclarator,
)
from namedexport.errors import UnsupportedDeclarationError

logger = logging.getLogger(__name__)


def is_wrapper_call(payload: ExportDefaultPayload, namespace: str, method: str) -> bool:
    """True for ``namespace.method(...)`` with plain identifiers on both sides."""
    if not isinstance(payload, CallExpression):
        return False
    callee = payload.callee
    return (
        isinstance(callee, MemberExpression)
        and isinstance(callee.object, Identifier)
        and callee.object.name == namespace
        and callee.property.name == method
    )


def declaration_to_expression(node: Declaration) -> FunctionExpression | ClassExpression:
    """Turn a located declaration into the equivalent named expression.

    Raises:
        UnsupportedDeclarationError: For variable declarations; wrapping an
            existing binding has no defined rewrite
    """
    if isinstance(node, FunctionDeclaration):
        return FunctionExpression(
            name=node.name,
            parameters=node.parameters,
            body=node.body,
            is_async=node.is_async,
            is_generator=node.is_generator,
            type_parameters=node.type_parameters,
            return_type=node.return_type,
        )
    if isinstance(node, ClassDeclaration):
        return ClassExpression(
            name=node.name,
            body=node.body,
            heritage=node.heritage,
            type_parameters=node.type_parameters,
            decorators=list(node.decorators),
        )
    raise UnsupportedDeclarationError(type(node).__name__)


def convert_wrapped_export(
    module: Module,
    namespace: str = DEFAULT_WRAPPER_NAMESPACE,
    method: str = DEFAULT_WRAPPER_METHOD,
) -> bool:
    """Split ``export default namespace.method(Id)`` into a const plus export.

    Args:
        module: Module to rewrite in place
        namespace: Wrapper object name, e.g. "Scrivito"
        method: Wrapper method name, e.g. "connect"

    Returns:
        True if the module was rewritten, False if nothing matched uniquely

    Raises:
        UnsupportedDeclarationError: If the wrapped identifier is bound by a
            variable declaration
    """
    exports = module.find(
        ExportDefaultDeclaration,
        lambda n: is_wrapper_call(n.declaration, namespace, method),
    )
    if len(exports) != 1:
        return False

    export = exports[0]
    call = export.declaration
    assert isinstance(call, CallExpression)
    if len(call.arguments) != 1 or not isinstance(call.arguments[0], Identifier):
        logger.debug("%s.%s export does not wrap a single identifier", namespace, method)
        return False

    wrapped = call.arguments[0]
    result = find_declaration(module, wrapped.name)
    if not isinstance(result, Found):
        logger.debug("No unique declaration for %s (%s)", wrapped.name, type(result).__name__)
        return False

    declaration = result.declaration
    expression = declaration_to_expression(declaration)
    replace_with_comments(
        module,
        declaration,
        VariableDeclaration(
            kind="const",
            declarations=[
                VariableDeclarator(
                    name=wrapped.name,
                    init=CallExpression(
                        callee=MemberExpression(
                            object=Identifier(name=namespace),
                            property=Identifier(name=method),
                        ),
                        arguments=[expression],
                    ),
                )
            ],
        ),
    )

    # The statement itself is reused, so its comments stay put.
    export.declaration = Identifier(name=wrapped.name)
    export.touch()
    logger.debug("Unwrapped %s.%s(%s)", namespace, method, wrapped.name)
    return True
