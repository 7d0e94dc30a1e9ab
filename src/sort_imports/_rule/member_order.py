"""Alphabetical ordering of the names inside one import statement."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..diagnostics import member_order_message
from ..models import Violation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..config import RuleConfig
    from ..models import MemberSpecifier


def check_member_order(
    members: Sequence[MemberSpecifier], config: RuleConfig
) -> Violation | None:
    """Return a violation for the first member that sorts before its predecessor.

    Equal keys count as ordered. Only the first offending member is reported.
    """
    keys = [config.sort_key(member.name) for member in members]
    for index in range(1, len(members)):
        if keys[index] < keys[index - 1]:
            member = members[index]
            return Violation(location=member.location, message=member_order_message(member.name))
    return None
