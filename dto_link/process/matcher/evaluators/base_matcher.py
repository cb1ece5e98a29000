# Path: dto_link/process/matcher/evaluators/base_matcher.py
"""
Base Name Matcher

Abstract base class for name matchers.
Defines the interface that all name matchers must implement, plus the
normalization helpers they share.
"""

import logging
from abc import ABC, abstractmethod

from ....constants import (
    IDENTIFIER_SEPARATORS,
    TYPE_ALIASES,
)


class BaseNameMatcher(ABC):
    """
    Abstract base class for name matchers.

    A name matcher compares two identifiers (a property name and a
    parameter name, or a DTO property and an entity key) and returns a
    score. It must be a pure function of its two arguments so that
    decoding is reproducible.

    Subclasses must implement compare().

    Example:
        matcher = DefaultNameMatcher()
        score = matcher.compare("CustomerId", "customer_id")
        # 1.0
    """

    def __init__(self):
        """Initialize matcher."""
        self.logger = logging.getLogger(f'process.matcher.names.{self.matcher_type}')

    @property
    @abstractmethod
    def matcher_type(self) -> str:
        """Return the type name of this matcher."""
        pass

    @abstractmethod
    def compare(self, name_a: str, name_b: str) -> float:
        """
        Compare two identifiers.

        Args:
            name_a: First identifier
            name_b: Second identifier

        Returns:
            Score, PERFECT_MATCH_VALUE when the names are equivalent
        """
        pass

    def _normalize_identifier(self, name: str) -> str:
        """
        Normalize an identifier for comparison.

        Handles variations like:
        - "CustomerId" vs "customerId" vs "customer_id"
        - "order-date" vs "OrderDate"

        Args:
            name: Identifier to normalize

        Returns:
            Case-folded identifier without separators
        """
        folded = name.strip().casefold()
        for separator in IDENTIFIER_SEPARATORS:
            folded = folded.replace(separator, '')
        return folded

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def normalize_type_name(type_name: str) -> str:
    """
    Normalize a declared type name.

    Case-folds, removes whitespace and maps aliases so that
    "String", "str" and "string" compare equal.

    Args:
        type_name: Declared type name

    Returns:
        Canonical type name
    """
    folded = ''.join(type_name.split()).casefold()
    return TYPE_ALIASES.get(folded, folded)


def types_match(type_a: str, type_b: str) -> bool:
    """Check if two declared type names refer to the same type."""
    return normalize_type_name(type_a) == normalize_type_name(type_b)


__all__ = ['BaseNameMatcher', 'normalize_type_name', 'types_match']
