"""sort-imports: a lint rule checking the order of import statements and their members."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._logging import setup_colored_logging
from ._version import __version__
from .config import DEFAULT_GROUP_ORDER, RuleConfig
from .diagnostics import RULE_ID, DiagnosticCollector, DiagnosticEmitter
from .models import (
    Diagnostic,
    ImportDescriptor,
    ImportKind,
    ImportRecord,
    MemberSpecifier,
    SpecifierDescriptor,
    SpecifierKind,
    Violation,
)
from .rule import SortImports

if TYPE_CHECKING:
    from collections.abc import Iterable


def lint_imports(
    descriptors: Iterable[ImportDescriptor], config: RuleConfig | None = None
) -> list[Diagnostic]:
    """Run sort-imports over one source unit and return its diagnostics."""
    collector = DiagnosticCollector()
    SortImports.lint_module(descriptors, collector, config)
    return collector.diagnostics


__all__ = [
    "DEFAULT_GROUP_ORDER",
    "RULE_ID",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticEmitter",
    "ImportDescriptor",
    "ImportKind",
    "ImportRecord",
    "MemberSpecifier",
    "RuleConfig",
    "SortImports",
    "SpecifierDescriptor",
    "SpecifierKind",
    "Violation",
    "__version__",
    "lint_imports",
    "setup_colored_logging",
]
