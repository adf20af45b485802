"""Diagnostics collector passed through the pipeline stages.

Each record is kept for the caller and also logged at WARNING level, which
the CLI's stderr handler prints as ``WARNING: <message>``.
"""

from __future__ import annotations

import logging

from namedexport.cst.domain_models import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class Diagnostics:
    """Collects advisory findings for one file."""

    def __init__(self, filepath: str) -> None:
        self.filepath = filepath
        self.records: list[Diagnostic] = []

    def warn(self, kind: DiagnosticKind, message: str, line: int | None = None) -> Diagnostic:
        record = Diagnostic(kind=kind, message=message, filepath=self.filepath, line=line)
        self.records.append(record)
        logger.warning(message)
        return record

    def check_filename(self, name: str, noun: str, line: int | None = None) -> Diagnostic | None:
        """Warn when an exported name does not appear in the file path."""
        if name in self.filepath:
            return None
        return self.warn(
            "filename-mismatch",
            f"Exported {noun} {name} does not match filename of {self.filepath}! "
            f"Ideally the {noun} and the file should have the same name.",
            line,
        )

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [r for r in self.records if r.kind == kind]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
