"""Pydantic result models for the default-to-named export transform.

- Diagnostic: one advisory finding (never raised, only reported)
- TransformResult: output text plus diagnostics for one file
"""

from typing import Literal

from pydantic import BaseModel

DiagnosticKind = Literal[
    "filename-mismatch",
    "dropped-comment",
    "unmodified-default-export",
]


class Diagnostic(BaseModel):
    """A single advisory finding from a transform stage.

    Attributes:
        kind: "filename-mismatch" | "dropped-comment" | "unmodified-default-export"
        message: Human-readable description, as written to the warning stream
        filepath: File the finding belongs to
        line: Line number in the source file (1-based, optional)
    """

    kind: DiagnosticKind
    message: str
    filepath: str
    line: int | None = None


class TransformResult(BaseModel):
    """Result of transforming one source file.

    Attributes:
        filepath: Path hint the transform ran with
        source: Rewritten source text
        changed: True if the printed text differs from the input
        formatted: True if the formatter pass ran on the output
        diagnostics: Advisory findings, in the order they were emitted
    """

    filepath: str
    source: str
    changed: bool
    formatted: bool = False
    diagnostics: list[Diagnostic] = []
