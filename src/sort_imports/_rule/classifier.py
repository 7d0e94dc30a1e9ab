"""
Import statement classification.
Turns an ImportDescriptor into an ImportRecord and its member list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import ImportKind, ImportRecord, MemberSpecifier, SpecifierKind

if TYPE_CHECKING:
    from ..models import ImportDescriptor


def classify_import(descriptor: ImportDescriptor) -> tuple[ImportRecord, list[MemberSpecifier]]:
    """Classify one import statement.

    Specifiers are processed in source order. Default and namespace
    specifiers always replace the record built so far; a named specifier
    only sets it when it is the first specifier of the statement. Named
    specifiers are MULTIPLE when the statement has more than one specifier
    of any shape.

    Returns:
        The statement's record and its named specifiers in source order
    """
    specifiers = descriptor.specifiers
    named_kind = ImportKind.MULTIPLE if len(specifiers) > 1 else ImportKind.SINGLE

    record = ImportRecord(sort_key="", location=descriptor.location, kind=ImportKind.NONE)
    members: list[MemberSpecifier] = []

    for index, specifier in enumerate(specifiers):
        if specifier.kind is SpecifierKind.NAMED:
            members.append(MemberSpecifier(name=specifier.local_name, location=specifier.location))
            if index == 0:
                record = ImportRecord(specifier.local_name, descriptor.location, named_kind)
        elif specifier.kind is SpecifierKind.DEFAULT:
            record = ImportRecord(specifier.local_name, descriptor.location, ImportKind.SINGLE)
        elif specifier.kind is SpecifierKind.NAMESPACE:
            record = ImportRecord(specifier.local_name, descriptor.location, ImportKind.NAMESPACE)
        else:
            msg = f"Unknown specifier kind: {specifier.kind!r}"
            raise ValueError(msg)

    return record, members
