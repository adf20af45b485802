"""Pipeline stages for the default-to-named export transform.

Exposes each stage so it can run on its own; namedexport.cst.pipeline runs
them in order.
"""

from namedexport.cst.converters.consistency import check_consistency
from namedexport.cst.converters.function_export import convert_function_export
from namedexport.cst.converters.identifier_export import convert_identifier_export
from namedexport.cst.converters.imports import normalize_imports, targets_converted_module
from namedexport.cst.converters.wrapped_export import (
    convert_wrapped_export,
    declaration_to_expression,
    is_wrapper_call,
)

__all__ = [
    "check_consistency",
    "convert_function_export",
    "convert_identifier_export",
    "convert_wrapped_export",
    "declaration_to_expression",
    "is_wrapper_call",
    "normalize_imports",
    "targets_converted_module",
]
