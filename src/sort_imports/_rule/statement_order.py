"""
Ordering of import statements across a whole source unit.
Checks group order and, within one group, alphabetical order of sort keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..diagnostics import declaration_order_message, group_order_message
from ..models import Violation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..config import RuleConfig
    from ..models import ImportRecord


def check_statement_order(
    records: Sequence[ImportRecord], config: RuleConfig
) -> list[Violation]:
    """Check every adjacent pair of import records, see :func:`find_statement_violations`."""
    return [violation for _, violation in find_statement_violations(records, config)]


def find_statement_violations(
    records: Sequence[ImportRecord], config: RuleConfig
) -> list[tuple[int, Violation]]:
    """Check every adjacent pair of import records.

    A pair whose kinds differ is only checked for group order: the later
    record is reported when its group ranks before the earlier one's. A pair
    in the same group is checked alphabetically and every out-of-order
    record is reported, not just the first.

    Returns:
        (record index, violation) pairs in ascending source order, at most
        one per record
    """
    positions = [config.group_position(record.kind) for record in records]
    keys = [config.sort_key(record.sort_key) for record in records]
    violations: list[tuple[int, Violation]] = []

    for index in range(1, len(records)):
        current, following = records[index - 1], records[index]

        if positions[index] != positions[index - 1]:
            if positions[index] < positions[index - 1]:
                violations.append(
                    (
                        index,
                        Violation(
                            location=following.location,
                            message=group_order_message(following.kind, current.kind),
                        ),
                    )
                )
            continue

        if keys[index] < keys[index - 1]:
            violations.append(
                (index, Violation(location=following.location, message=declaration_order_message()))
            )

    return violations
