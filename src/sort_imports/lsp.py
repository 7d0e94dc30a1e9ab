"""Conversion of sort-imports diagnostics to Language Server Protocol diagnostics."""

from __future__ import annotations

import logging
from typing import Any

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from . import models
from .diagnostics import RULE_ID

logger = logging.getLogger(__name__)


def to_range(location: Any) -> Range:
    """Convert a diagnostic location to an LSP range.

    A Position becomes an empty range starting and ending at it.
    """
    if isinstance(location, Range):
        return location
    if isinstance(location, Position):
        return Range(start=location, end=location)
    msg = f"Cannot convert location of type {type(location).__name__} to an LSP range"
    raise TypeError(msg)


def to_lsp_diagnostic(
    diagnostic: models.Diagnostic,
    severity: DiagnosticSeverity = DiagnosticSeverity.Warning,
) -> Diagnostic:
    """Build an LSP diagnostic from a collected sort-imports diagnostic."""
    return Diagnostic(
        range=to_range(diagnostic.location),
        message=diagnostic.message,
        severity=severity,
        code=diagnostic.rule_id,
        source=RULE_ID,
    )


class LSPDiagnosticSink:
    """Sink that accumulates LSP diagnostics ready to be published for a document."""

    def __init__(self, severity: DiagnosticSeverity = DiagnosticSeverity.Warning):
        self.severity = severity
        self.diagnostics: list[Diagnostic] = []

    def add_diagnostic(self, location: Any, rule_id: str, message: str) -> None:
        diagnostic = to_lsp_diagnostic(
            models.Diagnostic(rule_id=rule_id, location=location, message=message),
            self.severity,
        )
        logger.debug(
            f"{rule_id} at {diagnostic.range.start.line}:{diagnostic.range.start.character}: {message}"
        )
        self.diagnostics.append(diagnostic)
