"""Diagnostic messages, sinks and the emitter that feeds them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from .config import group_to_token
from .models import Diagnostic

if TYPE_CHECKING:
    from .models import ImportKind, Violation

RULE_ID = "sort-imports"

MEMBER_ORDER_MESSAGE = "Member '{name}' of the import declaration should be sorted alphabetically"
DECLARATION_ORDER_MESSAGE = "Imports should be sorted alphabetically"
GROUP_ORDER_MESSAGE = "Expected '{expected}' syntax before '{actual}' syntax"


def member_order_message(name: str) -> str:
    return MEMBER_ORDER_MESSAGE.format(name=name)


def declaration_order_message() -> str:
    return DECLARATION_ORDER_MESSAGE


def group_order_message(expected: ImportKind, actual: ImportKind) -> str:
    """Message for a statement of kind ``expected`` found after one of kind ``actual``."""
    return GROUP_ORDER_MESSAGE.format(
        expected=group_to_token(expected), actual=group_to_token(actual)
    )


class DiagnosticSink(Protocol):
    """Anything that accepts diagnostics from a rule."""

    def add_diagnostic(self, location: Any, rule_id: str, message: str) -> None: ...


class DiagnosticCollector:
    """In-memory sink keeping diagnostics in the order they were added."""

    def __init__(self):
        self.diagnostics: list[Diagnostic] = []

    def add_diagnostic(self, location: Any, rule_id: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(rule_id=rule_id, location=location, message=message))

    def messages(self) -> list[str]:
        return [diagnostic.message for diagnostic in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()


class DiagnosticEmitter:
    """Forwards violations to a sink under the sort-imports rule id."""

    def __init__(self, sink: DiagnosticSink, rule_id: str = RULE_ID):
        self.sink = sink
        self.rule_id = rule_id
        self.emitted = 0

    def emit(self, violation: Violation) -> None:
        self.sink.add_diagnostic(violation.location, self.rule_id, violation.message)
        self.emitted += 1

    def emit_all(self, violations: list[Violation]) -> None:
        for violation in violations:
            self.emit(violation)
