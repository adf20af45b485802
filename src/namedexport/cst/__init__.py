"""tree-sitter-based default-to-named export transform.

Provides:
- core: parse_file, parse_source utilities
- nodes: the shallow statement/expression model the converters match on
- printer: print_module, reproducing untouched regions verbatim
- locator: find_declaration with Found / NotFound / Ambiguous results
- converters: the five pipeline stages
- pipeline: transform_module, transform_source, transform_file
- domain_models: Diagnostic, TransformResult
"""
