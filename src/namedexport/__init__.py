"""namedexport: rewrite JavaScript/TypeScript default exports as named exports.

This package provides:
- A tree-sitter backed parser and verbatim-preserving printer
- The conversion pipeline (wrapped, identifier and function default exports,
  plus default imports of sibling modules)
- Structured diagnostics for anything left unconverted
- A single-file CLI
"""

from namedexport.config import PrintOptions, TransformConfig
from namedexport.cst.core import parse_file, parse_source
from namedexport.cst.domain_models import Diagnostic, TransformResult
from namedexport.cst.pipeline import transform_file, transform_module, transform_source
from namedexport.cst.printer import print_module
from namedexport.errors import (
    FormatterError,
    SourceParseError,
    TransformError,
    UnsupportedDeclarationError,
)

__all__ = [
    # Configuration
    "PrintOptions",
    "TransformConfig",
    # Parsing and printing
    "parse_file",
    "parse_source",
    "print_module",
    # Pipeline
    "transform_file",
    "transform_module",
    "transform_source",
    # Results
    "Diagnostic",
    "TransformResult",
    # Errors
    "FormatterError",
    "SourceParseError",
    "TransformError",
    "UnsupportedDeclarationError",
]
__version__ = "0.1.0"
