# Path: dto_link/process/matcher/evaluators/name_matcher.py
"""
Name Matchers

Concrete name matchers. DefaultNameMatcher is tolerant of case, word
separators and an identity suffix; StrictNameMatcher only ignores case.
"""

from ....constants import (
    PERFECT_MATCH_VALUE,
    NO_MATCH_VALUE,
    IDENTITY_SUFFIX,
    NAME_MATCHER_DEFAULT,
    NAME_MATCHER_STRICT,
)
from .base_matcher import BaseNameMatcher


class DefaultNameMatcher(BaseNameMatcher):
    """
    Convention-tolerant name matcher.

    Names match fully when, after normalization, they are equal or
    differ only by the identity suffix on one side:
    - "CustomerId" == "customerId" == "customer_id"
    - "Customer" == "CustomerId"

    Anything else scores NO_MATCH_VALUE.
    """

    @property
    def matcher_type(self) -> str:
        return NAME_MATCHER_DEFAULT

    def compare(self, name_a: str, name_b: str) -> float:
        norm_a = self._normalize_identifier(name_a)
        norm_b = self._normalize_identifier(name_b)

        if not norm_a or not norm_b:
            return NO_MATCH_VALUE

        if norm_a == norm_b:
            return PERFECT_MATCH_VALUE

        if (norm_a + IDENTITY_SUFFIX == norm_b
                or norm_b + IDENTITY_SUFFIX == norm_a):
            return PERFECT_MATCH_VALUE

        return NO_MATCH_VALUE


class StrictNameMatcher(BaseNameMatcher):
    """Name matcher that only ignores case."""

    @property
    def matcher_type(self) -> str:
        return NAME_MATCHER_STRICT

    def compare(self, name_a: str, name_b: str) -> float:
        if name_a and name_a.casefold() == name_b.casefold():
            return PERFECT_MATCH_VALUE
        return NO_MATCH_VALUE


NAME_MATCHERS: dict[str, type] = {
    NAME_MATCHER_DEFAULT: DefaultNameMatcher,
    NAME_MATCHER_STRICT: StrictNameMatcher,
}


def build_name_matcher(name: str = NAME_MATCHER_DEFAULT) -> BaseNameMatcher:
    """
    Build a name matcher from its configured name.

    Args:
        name: 'default' or 'strict'

    Returns:
        Name matcher instance

    Raises:
        ValueError: If the name is unknown
    """
    key = name.strip().lower()
    if key not in NAME_MATCHERS:
        raise ValueError(
            f"Unknown name matcher '{name}'. "
            f"Choose one of: {', '.join(sorted(NAME_MATCHERS))}"
        )
    return NAME_MATCHERS[key]()


__all__ = [
    'DefaultNameMatcher',
    'StrictNameMatcher',
    'NAME_MATCHERS',
    'build_name_matcher',
]
