"""
Rule components - classification and the two ordering checks.

The ``SortImports`` driver in ``sort_imports.rule`` wires these together for
one source unit.
"""

from __future__ import annotations

from .classifier import classify_import
from .member_order import check_member_order
from .statement_order import check_statement_order, find_statement_violations

__all__ = [
    "check_member_order",
    "check_statement_order",
    "classify_import",
    "find_statement_violations",
]
