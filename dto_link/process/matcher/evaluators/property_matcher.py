# Path: dto_link/process/matcher/evaluators/property_matcher.py
"""
Property Matcher

Finds how well a DTO property mirrors one of an entity's key
properties. A DTO property is a key mirror when its best score reaches
PERFECT_MATCH_VALUE.
"""

import logging
from typing import Iterable

from ....constants import PERFECT_MATCH_VALUE, NO_MATCH_VALUE
from ..models.descriptors import PropertyDescriptor
from .base_matcher import BaseNameMatcher


class BestPropertyMatch:
    """
    Scores a DTO property against the entity's key property names.

    Example:
        best = BestPropertyMatch(DefaultNameMatcher())
        best.find_best_match(dto_prop, ["OrderId"])   # 1.0 for "orderId"
    """

    def __init__(self, name_matcher: BaseNameMatcher):
        """
        Initialize property matcher.

        Args:
            name_matcher: Matcher used to compare names
        """
        self.logger = logging.getLogger('process.matcher.property')
        self.name_matcher = name_matcher

    def find_best_match(
        self,
        dto_property: PropertyDescriptor,
        key_properties: Iterable[str]
    ) -> float:
        """
        Get the best name score against the key properties.

        Args:
            dto_property: DTO property to check
            key_properties: Names of the entity's key properties

        Returns:
            Highest score, NO_MATCH_VALUE when there are no keys
        """
        best = NO_MATCH_VALUE
        for key_name in key_properties:
            score = self.name_matcher.compare(dto_property.name, key_name)
            if score > best:
                best = score
        return best

    def is_key_mirror(
        self,
        dto_property: PropertyDescriptor,
        key_properties: Iterable[str]
    ) -> bool:
        """Check if a DTO property mirrors an entity key."""
        is_mirror = self.find_best_match(dto_property, key_properties) >= PERFECT_MATCH_VALUE
        if is_mirror:
            self.logger.debug(f"{dto_property.name} mirrors an entity key")
        return is_mirror


__all__ = ['BestPropertyMatch']
