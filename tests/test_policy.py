"""Tests for option merging and process-wide defaults."""

import math

import pytest
from pydantic import ValidationError

from truncation.policy import (
    TruncationPolicy,
    build_policy,
    get_defaults,
    reset_defaults,
    resolve_limit,
    setup,
)


class TestResolveLimit:
    """Tests for length validation."""

    def test_valid_lengths(self):
        assert resolve_limit(5) == 5
        assert resolve_limit(7.9) == 7

    def test_invalid_lengths(self):
        for value in [None, 0, -3, 0.5, math.nan, math.inf, -math.inf, "5", True, False]:
            assert resolve_limit(value) is None, value


class TestBuildPolicy:
    """Tests for building a policy from call arguments."""

    def test_positional_length(self):
        assert build_policy(5).length == 5

    def test_options_mapping_in_place_of_length(self):
        policy = build_policy({"length": 6, "stripTags": True})

        assert policy.length == 6
        assert policy.strip_tags is True

    def test_length_and_options(self):
        policy = build_policy(10, {"byWords": True, "reserveLastWord": -1})

        assert policy.length == 10
        assert policy.by_words is True
        assert policy.reserve_last_word == -1

    def test_keyword_overrides_win(self):
        policy = build_policy(5, {"ellipsis": "~"}, ellipsis="!")

        assert policy.ellipsis == "!"

    def test_positional_length_wins_over_options(self):
        assert build_policy(5, {"length": 50}).length == 5

    def test_defaults(self):
        policy = build_policy(5)

        assert policy.ellipsis == "..."
        assert policy.by_words is False
        assert policy.reserve_last_word is False
        assert policy.excludes == ()
        assert policy.bidirectional_target is None

    def test_invalid_length_becomes_none(self):
        assert build_policy(0).length is None
        assert build_policy(math.inf).length is None
        assert build_policy().length is None

    def test_excludes_normalized(self):
        assert build_policy(5, excludes="img").excludes == ("img",)

        policy = build_policy(5, excludes=["img", "", ".ad"])
        assert policy.excludes == ("img", ".ad")
        assert policy.exclude_selector == "img,.ad"

    def test_unknown_options_ignored(self):
        assert build_policy(5, colour="red").length == 5

    def test_wrong_type_raises(self):
        with pytest.raises(ValidationError):
            build_policy(5, ellipsis=3)

    def test_policy_is_frozen(self):
        policy = build_policy(5)

        with pytest.raises(ValidationError):
            policy.length = 3

    def test_camel_case_aliases(self):
        policy = TruncationPolicy(byWords=True, keepWhitespaces=True)

        assert policy.by_words is True
        assert policy.keep_whitespaces is True


class TestSetup:
    """Tests for process-wide defaults."""

    def test_setup_sets_default_length(self):
        setup(length=5)

        assert build_policy().length == 5

    def test_setup_accepts_mapping_and_camel_case(self):
        setup({"byWords": True})

        assert get_defaults()["by_words"] is True
        assert build_policy(3).by_words is True

    def test_explicit_none_does_not_override_default(self):
        setup(ellipsis="~")

        assert build_policy(5, ellipsis=None).ellipsis == "~"

    def test_explicit_false_overrides_default(self):
        setup(by_words=True)

        assert build_policy(5, by_words=False).by_words is False

    def test_setup_none_clears_default(self):
        setup(length=5)
        setup(length=None)

        assert build_policy().length is None

    def test_invalid_setup_leaves_defaults_untouched(self):
        with pytest.raises(ValidationError):
            setup(ellipsis=3)

        assert get_defaults()["ellipsis"] == "..."

    def test_reset_defaults(self):
        setup(length=5, ellipsis="~")
        reset_defaults()

        assert get_defaults()["length"] is None
        assert get_defaults()["ellipsis"] == "..."
