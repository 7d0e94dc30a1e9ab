"""
The sort-imports rule.

``SortImports`` is created once per source unit. The traversal calls
``visit_import_decl`` for each import statement in source order, which
checks member ordering straight away, and ``finish`` once traversal is done,
which checks statement ordering over everything collected and emits all
violations in ascending source order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._logging import get_logger
from ._rule import check_member_order, classify_import, find_statement_violations
from .config import RuleConfig
from .diagnostics import RULE_ID, DiagnosticEmitter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .diagnostics import DiagnosticSink
    from .models import ImportDescriptor, ImportRecord, Violation

logger = get_logger(__name__, "rule")


class SortImports:
    """Checks ordering of import statements and of names within them."""

    code = RULE_ID

    def __init__(self, sink: DiagnosticSink, config: RuleConfig | None = None):
        self.config = config if config is not None else RuleConfig()
        self.emitter = DiagnosticEmitter(sink, self.code)
        self._records: list[ImportRecord] = []
        # Statement index -> first unsorted member of that statement
        self._member_violations: dict[int, Violation] = {}

    @property
    def records(self) -> tuple[ImportRecord, ...]:
        """Records collected so far, in source order."""
        return tuple(self._records)

    def visit_import_decl(self, descriptor: ImportDescriptor) -> ImportRecord:
        """Classify one import statement and check its member order.

        A member violation is kept until :meth:`finish` so that it is emitted
        in source order with the statement violations.
        """
        record, members = classify_import(descriptor)
        index = len(self._records)
        self._records.append(record)
        logger.debug(
            f"Import #{index + 1} classified as {record.kind.value!r} "
            f"with key {record.sort_key!r} and {len(members)} member(s)"
        )

        if self.config.should_check_members():
            violation = check_member_order(members, self.config)
            if violation is not None:
                self._member_violations[index] = violation

        return record

    def finish(self) -> list[Violation]:
        """Check statement ordering over all collected imports and emit every violation.

        Violations are ordered by statement. Within one statement the
        statement-level violation comes first, since it starts at the
        statement's first character and member violations start inside it.
        """
        statement_violations = find_statement_violations(self._records, self.config)
        ordered = sorted(
            [(index, 0, violation) for index, violation in statement_violations]
            + [(index, 1, violation) for index, violation in self._member_violations.items()],
            key=lambda item: item[:2],
        )
        violations = [violation for _, _, violation in ordered]

        emitted_before = self.emitter.emitted
        self.emitter.emit_all(violations)
        logger.debug(
            f"Checked {len(self._records)} import(s): {len(statement_violations)} ordering "
            f"and {len(self._member_violations)} member violation(s), "
            f"{self.emitter.emitted - emitted_before} diagnostic(s) emitted"
        )
        return violations

    @classmethod
    def lint_module(
        cls,
        descriptors: Iterable[ImportDescriptor],
        sink: DiagnosticSink,
        config: RuleConfig | None = None,
    ) -> SortImports:
        """Run the rule over all import statements of one source unit."""
        rule = cls(sink, config)
        for descriptor in descriptors:
            rule.visit_import_decl(descriptor)
        rule.finish()
        return rule
