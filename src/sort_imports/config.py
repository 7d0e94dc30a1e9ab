"""
Rule configuration for sort-imports.
Resolves raw option mappings and group tokens into a RuleConfig.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import param

from .models import ImportKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_GROUP_ORDER: tuple[ImportKind, ...] = (
    ImportKind.NONE,
    ImportKind.NAMESPACE,
    ImportKind.MULTIPLE,
    ImportKind.SINGLE,
)

# Group token <-> ImportKind. Unknown tokens fall back to NONE.
_TOKEN_TO_GROUP: dict[str, ImportKind] = {kind.value: kind for kind in ImportKind}
_GROUP_TO_TOKEN: dict[ImportKind, str] = {kind: token for token, kind in _TOKEN_TO_GROUP.items()}
_FALLBACK_GROUP = ImportKind.NONE

# Option names accepted by RuleConfig.from_options, mapped to parameter names
_OPTION_NAMES: dict[str, str] = {
    "ignoreCase": "case_insensitive",
    "ignoreDeclarationSort": "skip_declaration_sort",
    "ignoreMemberSort": "skip_member_sort",
}
_GROUP_ORDER_OPTION = "memberSyntaxSortOrder"


def group_from_token(token: str) -> ImportKind:
    """Resolve a group token such as ``"multiple"`` to its ImportKind."""
    kind = _TOKEN_TO_GROUP.get(token)
    if kind is None:
        logger.warning(
            f"Unrecognized import group {token!r}, treating it as {_FALLBACK_GROUP.value!r}"
        )
        return _FALLBACK_GROUP
    return kind


def group_to_token(kind: ImportKind) -> str:
    """Return the configuration token for an ImportKind."""
    return _GROUP_TO_TOKEN[kind]


def resolve_group_order(tokens: Iterable[str]) -> list[ImportKind]:
    """Resolve a sequence of group tokens, keeping their order."""
    group_order = [group_from_token(token) for token in tokens]
    if len(group_order) != len(DEFAULT_GROUP_ORDER):
        logger.warning(
            f"Expected {len(DEFAULT_GROUP_ORDER)} import groups, got {len(group_order)}"
        )
    return group_order


class RuleConfig(param.Parameterized):
    """Options controlling the sort-imports rule.

    All parameters are constant: they can only be given when the config is
    constructed.
    """

    case_insensitive = param.Boolean(
        default=False,
        constant=True,
        doc="Compare names after ASCII lower-casing them.",
    )

    skip_declaration_sort = param.Boolean(
        default=False,
        constant=True,
        doc="Skip member ordering checks. Statement ordering is still checked.",
    )

    skip_member_sort = param.Boolean(
        default=False,
        constant=True,
        doc="Skip member ordering checks within multi-name imports.",
    )

    group_order = param.List(
        default=list(DEFAULT_GROUP_ORDER),
        item_type=ImportKind,
        constant=True,
        doc="Relative order of import statement kinds.",
    )

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> RuleConfig:
        """Build a config from the camelCase option mapping used in lint configuration."""
        options = dict(options or {})
        kwargs: dict[str, Any] = {}

        for option, parameter in _OPTION_NAMES.items():
            if option not in options:
                continue
            value = options.pop(option)
            if isinstance(value, bool):
                kwargs[parameter] = value
            else:
                logger.warning(
                    f"Option {option!r} expects true or false, got {value!r}; using the default"
                )

        tokens = options.pop(_GROUP_ORDER_OPTION, None)
        if tokens is not None:
            kwargs["group_order"] = resolve_group_order(tokens)

        for unknown in options:
            logger.debug(f"Ignoring unknown sort-imports option {unknown!r}")

        return cls(**kwargs)

    def should_check_members(self) -> bool:
        """Whether member ordering is checked within each statement."""
        return not (self.skip_member_sort or self.skip_declaration_sort)

    def group_position(self, kind: ImportKind) -> int:
        """Rank of ``kind`` in the configured group order.

        Kinds missing from the configured order rank after every listed kind,
        in default order.
        """
        if kind in self.group_order:
            return self.group_order.index(kind)
        return len(self.group_order) + DEFAULT_GROUP_ORDER.index(kind)

    def sort_key(self, name: str) -> str:
        """Key used to compare two bound names."""
        if self.case_insensitive:
            return _ascii_lower(name)
        return name


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def _ascii_lower(name: str) -> str:
    return name.translate(_ASCII_LOWER)
