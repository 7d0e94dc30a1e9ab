"""Tests for rule configuration."""

from __future__ import annotations

import logging

import pytest

from sort_imports import DEFAULT_GROUP_ORDER, ImportKind, RuleConfig
from sort_imports.config import group_from_token, group_to_token, resolve_group_order


class TestGroupTokens:
    """Test the token <-> ImportKind table."""

    @pytest.mark.parametrize(
        ("token", "kind"),
        [
            ("none", ImportKind.NONE),
            ("all", ImportKind.NAMESPACE),
            ("multiple", ImportKind.MULTIPLE),
            ("single", ImportKind.SINGLE),
        ],
    )
    def test_round_trip(self, token, kind):
        assert group_from_token(token) is kind
        assert group_to_token(kind) == token

    @pytest.mark.parametrize("token", ["namespace", "Single", "", "default"])
    def test_unknown_token_falls_back_to_none(self, token, caplog):
        with caplog.at_level(logging.WARNING, logger="sort_imports.config"):
            assert group_from_token(token) is ImportKind.NONE

        assert "Unrecognized import group" in caplog.text

    def test_resolve_group_order_keeps_order(self):
        assert resolve_group_order(["single", "multiple", "all", "none"]) == [
            ImportKind.SINGLE,
            ImportKind.MULTIPLE,
            ImportKind.NAMESPACE,
            ImportKind.NONE,
        ]

    def test_resolve_group_order_wrong_length(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sort_imports.config"):
            assert resolve_group_order(["single"]) == [ImportKind.SINGLE]

        assert "Expected 4 import groups, got 1" in caplog.text


class TestRuleConfig:
    """Test RuleConfig defaults and option resolution."""

    def test_defaults(self):
        config = RuleConfig()

        assert config.case_insensitive is False
        assert config.skip_declaration_sort is False
        assert config.skip_member_sort is False
        assert config.group_order == list(DEFAULT_GROUP_ORDER)
        assert config.should_check_members()

    @pytest.mark.parametrize("options", [None, {}])
    def test_from_empty_options(self, options):
        config = RuleConfig.from_options(options)

        assert config.group_order == list(DEFAULT_GROUP_ORDER)
        assert config.case_insensitive is False

    def test_from_options(self):
        config = RuleConfig.from_options(
            {
                "ignoreCase": True,
                "ignoreDeclarationSort": False,
                "ignoreMemberSort": True,
                "memberSyntaxSortOrder": ["single", "multiple", "all", "none"],
            }
        )

        assert config.case_insensitive is True
        assert config.skip_declaration_sort is False
        assert config.skip_member_sort is True
        assert config.group_order[0] is ImportKind.SINGLE
        assert config.group_order[-1] is ImportKind.NONE

    def test_from_options_does_not_mutate_input(self):
        options = {"ignoreCase": True, "allowSeparatedGroups": True}
        RuleConfig.from_options(options)

        assert options == {"ignoreCase": True, "allowSeparatedGroups": True}

    def test_unknown_option_is_ignored(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sort_imports.config"):
            config = RuleConfig.from_options({"allowSeparatedGroups": True})

        assert config.group_order == list(DEFAULT_GROUP_ORDER)
        assert "allowSeparatedGroups" in caplog.text

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_non_boolean_option_keeps_default(self, value, caplog):
        """A string such as "false" must not switch an option on."""
        with caplog.at_level(logging.WARNING, logger="sort_imports.config"):
            config = RuleConfig.from_options(
                {"ignoreCase": value, "ignoreMemberSort": value, "ignoreDeclarationSort": value}
            )

        assert config.case_insensitive is False
        assert config.skip_member_sort is False
        assert config.skip_declaration_sort is False
        assert "Option 'ignoreCase' expects true or false" in caplog.text

    def test_unrecognized_tokens_never_fail(self):
        config = RuleConfig.from_options({"memberSyntaxSortOrder": ["bogus", "all", "x", "y"]})

        assert config.group_order == [
            ImportKind.NONE,
            ImportKind.NAMESPACE,
            ImportKind.NONE,
            ImportKind.NONE,
        ]

    def test_parameters_are_constant(self):
        config = RuleConfig()

        with pytest.raises(TypeError):
            config.case_insensitive = True

    def test_either_skip_flag_disables_member_check(self):
        assert not RuleConfig(skip_member_sort=True).should_check_members()
        assert not RuleConfig(skip_declaration_sort=True).should_check_members()

    def test_group_position(self):
        config = RuleConfig()

        assert [config.group_position(kind) for kind in DEFAULT_GROUP_ORDER] == [0, 1, 2, 3]

    def test_group_position_uses_first_occurrence(self):
        config = RuleConfig.from_options({"memberSyntaxSortOrder": ["single", "none", "none", "x"]})

        assert config.group_position(ImportKind.SINGLE) == 0
        assert config.group_position(ImportKind.NONE) == 1
        assert config.group_position(ImportKind.NAMESPACE) == 5
        assert config.group_position(ImportKind.MULTIPLE) == 6

    def test_sort_key(self):
        assert RuleConfig().sort_key("FooBar") == "FooBar"
        assert RuleConfig(case_insensitive=True).sort_key("FooBar") == "foobar"
