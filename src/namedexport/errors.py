"""Error types for the default-to-named export transform.

Recoverable non-matches never raise; these exceptions are the hard failures
that abort the transform of a whole file.
"""

from __future__ import annotations

__all__ = [
    "FormatterError",
    "SourceParseError",
    "TransformError",
    "UnsupportedDeclarationError",
]


class TransformError(Exception):
    """Base class for failures that abort a file's transform."""


class UnsupportedDeclarationError(TransformError, NotImplementedError):
    """Raised when a wrapped default export targets a declaration kind
    that cannot be turned into an expression (a variable declaration).
    """

    def __init__(self, node_type: str) -> None:
        super().__init__(f"Node type {node_type} not yet implemented")
        self.node_type = node_type


class SourceParseError(TransformError):
    """Raised when the source text does not parse cleanly.

    Attributes:
        line: 1-based line of the first error or missing node
        column: 1-based column of the first error or missing node
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class FormatterError(TransformError):
    """Raised when the formatter process exits with a non-zero status."""

    def __init__(self, returncode: int, stderr: str) -> None:
        super().__init__(f"Formatter failed with exit code {returncode}: {stderr.strip()}")
        self.returncode = returncode
        self.stderr = stderr
