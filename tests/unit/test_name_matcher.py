# Path: tests/unit/test_name_matcher.py
"""
Unit Tests for Name Matchers

Tests:
- Case and separator tolerance
- Identity suffix handling
- Strict matcher
- Matcher factory
- Type name normalization
"""

import pytest

from dto_link.constants import PERFECT_MATCH_VALUE, NO_MATCH_VALUE
from dto_link.process.matcher.evaluators import (
    BaseNameMatcher,
    DefaultNameMatcher,
    StrictNameMatcher,
    build_name_matcher,
    normalize_type_name,
    types_match,
)


class TestDefaultNameMatcher:
    """Test the convention-tolerant matcher."""

    @pytest.mark.parametrize('name_a,name_b', [
        ('Amount', 'amount'),
        ('AMOUNT', 'amount'),
        ('CustomerId', 'customerId'),
        ('CustomerId', 'customer_id'),
        ('order-date', 'OrderDate'),
    ])
    def test_equivalent_names_match_perfectly(self, name_a, name_b):
        """Case and separators are ignored."""
        assert DefaultNameMatcher().compare(name_a, name_b) == PERFECT_MATCH_VALUE

    def test_identity_suffix_on_one_side_matches(self):
        """'Customer' and 'CustomerId' are the same name."""
        matcher = DefaultNameMatcher()
        assert matcher.compare('Customer', 'CustomerId') == PERFECT_MATCH_VALUE
        assert matcher.compare('customer_id', 'Customer') == PERFECT_MATCH_VALUE

    def test_different_names_do_not_match(self):
        assert DefaultNameMatcher().compare('Amount', 'Status') == NO_MATCH_VALUE

    def test_prefix_is_not_a_match(self):
        """Only the identity suffix is optional."""
        assert DefaultNameMatcher().compare('Order', 'OrderDate') == NO_MATCH_VALUE

    def test_empty_name_never_matches(self):
        matcher = DefaultNameMatcher()
        assert matcher.compare('', '') == NO_MATCH_VALUE
        assert matcher.compare('_', 'Id') == NO_MATCH_VALUE

    def test_is_symmetric(self):
        matcher = DefaultNameMatcher()
        for a, b in [('Id', 'ID'), ('Customer', 'CustomerId'), ('X', 'Y')]:
            assert matcher.compare(a, b) == matcher.compare(b, a)

    def test_is_deterministic(self):
        matcher = DefaultNameMatcher()
        scores = {matcher.compare('OrderId', 'order_id') for _ in range(10)}
        assert scores == {PERFECT_MATCH_VALUE}


class TestStrictNameMatcher:
    """Test the case-only matcher."""

    def test_case_is_ignored(self):
        assert StrictNameMatcher().compare('Amount', 'aMOUNT') == PERFECT_MATCH_VALUE

    def test_separators_are_not_ignored(self):
        assert StrictNameMatcher().compare('CustomerId', 'customer_id') == NO_MATCH_VALUE

    def test_identity_suffix_is_not_optional(self):
        assert StrictNameMatcher().compare('Customer', 'CustomerId') == NO_MATCH_VALUE


class TestBuildNameMatcher:
    """Test the matcher factory."""

    def test_default(self):
        assert isinstance(build_name_matcher(), DefaultNameMatcher)

    def test_strict_is_case_insensitive(self):
        assert isinstance(build_name_matcher(' Strict '), StrictNameMatcher)

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown name matcher"):
            build_name_matcher('fuzzy')

    def test_custom_matcher_can_be_plugged_in(self):
        """Subclasses of BaseNameMatcher satisfy the interface."""

        class ExactMatcher(BaseNameMatcher):
            @property
            def matcher_type(self) -> str:
                return 'exact'

            def compare(self, name_a: str, name_b: str) -> float:
                return PERFECT_MATCH_VALUE if name_a == name_b else NO_MATCH_VALUE

        matcher = ExactMatcher()
        assert matcher.compare('a', 'a') == PERFECT_MATCH_VALUE
        assert matcher.compare('a', 'A') == NO_MATCH_VALUE


class TestTypeNames:
    """Test declared type name comparison."""

    @pytest.mark.parametrize('type_a,type_b', [
        ('string', 'str'),
        ('String', 'string'),
        ('int', 'Integer'),
        ('bool', 'boolean'),
        ('Decimal', 'decimal'),
        ('list[int]', 'list[ int ]'),
    ])
    def test_aliases_match(self, type_a, type_b):
        assert types_match(type_a, type_b)

    def test_different_types_do_not_match(self):
        assert not types_match('int', 'string')

    def test_normalize_maps_alias(self):
        assert normalize_type_name('STR') == 'string'
