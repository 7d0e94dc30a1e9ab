"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest
from lsprotocol.types import Position, Range

from sort_imports import (
    DiagnosticCollector,
    ImportDescriptor,
    SpecifierDescriptor,
    SpecifierKind,
)

NamedSpec = str | tuple[str, str]


class ImportBuilder:
    """Builds import descriptors laid out the way the statement would be written.

    Each statement is rendered as ``import <specifiers> from '<source>';`` on
    its own zero-based line, and every location is the LSP range the bound
    name or the statement occupies in that text.
    """

    def __init__(self):
        self.lines: dict[int, str] = {}

    def statement(
        self,
        line: int = 0,
        *,
        default: str | None = None,
        namespace: str | None = None,
        named: Sequence[NamedSpec] = (),
        source: str = "foo.js",
    ) -> ImportDescriptor:
        text = "import "
        specifiers: list[SpecifierDescriptor] = []

        def bind(kind: SpecifierKind, local: str) -> None:
            nonlocal text
            start = len(text)
            text += local
            specifiers.append(SpecifierDescriptor(kind, local, _range(line, start, len(text))))

        if default is not None:
            bind(SpecifierKind.DEFAULT, default)
            if namespace is not None or named:
                text += ", "
        if namespace is not None:
            text += "* as "
            bind(SpecifierKind.NAMESPACE, namespace)
        if named:
            text += "{"
            for index, spec in enumerate(named):
                if index:
                    text += ", "
                if isinstance(spec, tuple):
                    imported, local = spec
                    text += f"{imported} as "
                else:
                    local = spec
                bind(SpecifierKind.NAMED, local)
            text += "}"

        text = f"import '{source}';" if not specifiers else f"{text} from '{source}';"
        self.lines[line] = text
        return ImportDescriptor(tuple(specifiers), _range(line, 0, len(text)), source)

    def default(self, name: str, line: int = 0, source: str = "foo.js") -> ImportDescriptor:
        return self.statement(line, default=name, source=source)

    def namespace(self, name: str, line: int = 0, source: str = "foo.js") -> ImportDescriptor:
        return self.statement(line, namespace=name, source=source)

    def named(self, *names: NamedSpec, line: int = 0, source: str = "foo.js") -> ImportDescriptor:
        return self.statement(line, named=names, source=source)

    def side_effect(self, line: int = 0, source: str = "foo.js") -> ImportDescriptor:
        return self.statement(line, source=source)

    def source(self) -> str:
        """The rendered statements joined into one source text."""
        if not self.lines:
            return ""
        return "\n".join(self.lines.get(index, "") for index in range(max(self.lines) + 1))


def _range(line: int, start: int, end: int) -> Range:
    return Range(start=Position(line=line, character=start), end=Position(line=line, character=end))


@pytest.fixture
def build() -> ImportBuilder:
    """A fresh import descriptor builder."""
    return ImportBuilder()


@pytest.fixture
def collector() -> DiagnosticCollector:
    """An empty in-memory diagnostic sink."""
    return DiagnosticCollector()
