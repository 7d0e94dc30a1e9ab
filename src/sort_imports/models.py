"""Data models for the sort-imports rule."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ImportKind(Enum):
    """Shape classification of an import statement.

    The value of each member is the token used for it in configuration and
    diagnostic messages.
    """

    NONE = "none"
    NAMESPACE = "all"
    MULTIPLE = "multiple"
    SINGLE = "single"


class SpecifierKind(Enum):
    """Form of a single bound name inside an import statement."""

    DEFAULT = "default"
    NAMESPACE = "namespace"
    NAMED = "named"


@dataclass(frozen=True)
class SpecifierDescriptor:
    """One specifier as reported by the traversal.

    ``location`` is the range of the bound local name, so for ``baz as qux``
    it points at ``qux``.
    """

    kind: SpecifierKind
    local_name: str
    location: Any = None


@dataclass(frozen=True)
class ImportDescriptor:
    """One import statement as reported by the traversal."""

    specifiers: tuple[SpecifierDescriptor, ...] = ()
    location: Any = None
    source: str | None = None


@dataclass(frozen=True)
class ImportRecord:
    """Normalized view of an import statement used for statement ordering."""

    sort_key: str
    location: Any
    kind: ImportKind


@dataclass(frozen=True)
class MemberSpecifier:
    """A named specifier checked for member ordering."""

    name: str
    location: Any


@dataclass(frozen=True)
class Violation:
    """An ordering problem found by one of the checks."""

    location: Any
    message: str


@dataclass(frozen=True)
class Diagnostic:
    """A violation tagged with the rule that produced it."""

    rule_id: str
    location: Any
    message: str
