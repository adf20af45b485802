"""The default-to-named export pipeline.

Stages run in a fixed order, each seeing the previous stage's rewrites:

1. convert_wrapped_export: ``export default Ns.method(Id)``
2. convert_identifier_export: ``export default Id``
3. convert_function_export: ``export default function name() {}``
4. check_consistency: warn if a default export survived
5. normalize_imports: ``import X from "./x"`` -> ``import { X } from "./x"``
"""

from __future__ import annotations

import logging

from namedexport.config import TransformConfig
from namedexport.cst.converters import (
    check_consistency,
    convert_function_export,
    convert_identifier_export,
    convert_wrapped_export,
    normalize_imports,
)
from namedexport.cst.core import parse_source
from namedexport.cst.diagnostics import Diagnostics
from namedexport.cst.domain_models import TransformResult
from namedexport.cst.nodes import Module
from namedexport.cst.printer import print_module
from namedexport.formatter import format_source

logger = logging.getLogger(__name__)


def transform_module(
    module: Module,
    filepath: str,
    config: TransformConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> Diagnostics:
    """Run all stages on an already parsed module, mutating it in place.

    Raises:
        UnsupportedDeclarationError: If a wrapped export targets a variable
    """
    config = config or TransformConfig()
    if diagnostics is None:
        diagnostics = Diagnostics(filepath)

    convert_wrapped_export(module, config.wrapper_namespace, config.wrapper_method)
    convert_identifier_export(module, diagnostics)
    convert_function_export(module, diagnostics)
    check_consistency(module, diagnostics)
    rewritten = normalize_imports(module)
    logger.debug("%s: %d import(s) rewritten", filepath, rewritten)
    return diagnostics


def transform_source(
    source: str,
    filepath: str,
    config: TransformConfig | None = None,
) -> TransformResult:
    """Parse, transform, print and format one file's source.

    Args:
        source: File contents
        filepath: Path hint for grammar choice, diagnostics and the formatter
        config: Transform settings, defaults to TransformConfig()

    Returns:
        TransformResult with the rewritten text and collected diagnostics

    Raises:
        SourceParseError: If the source does not parse
        UnsupportedDeclarationError: If a wrapped export targets a variable
        FormatterError: If the formatter rejects the output
    """
    config = config or TransformConfig()
    module = parse_source(source, filepath)
    diagnostics = transform_module(module, filepath, config)

    output = print_module(module, config.print_options)
    formatted = False
    if config.format_output:
        output, formatted = format_source(output, filepath, config.prettier_command)

    return TransformResult(
        filepath=filepath,
        source=output,
        changed=output != source,
        formatted=formatted,
        diagnostics=diagnostics.records,
    )


def transform_file(path: str, config: TransformConfig | None = None) -> TransformResult:
    """Transform the file at ``path`` without writing it back."""
    with open(path, encoding="utf-8") as f:
        source = f.read()
    return transform_source(source, path, config)
