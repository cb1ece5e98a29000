# Path: dto_link/process/matcher/evaluators/__init__.py
"""
Matchers

Each matcher handles one kind of comparison:
- BaseNameMatcher / DefaultNameMatcher / StrictNameMatcher: identifiers
- BestPropertyMatch: DTO property against entity keys
- MethodSignatureMatcher: mutator parameters against DTO properties
"""

from .base_matcher import BaseNameMatcher, normalize_type_name, types_match
from .name_matcher import (
    DefaultNameMatcher,
    StrictNameMatcher,
    build_name_matcher,
)
from .property_matcher import BestPropertyMatch
from .signature_matcher import MethodSignatureMatcher

__all__ = [
    'BaseNameMatcher',
    'normalize_type_name',
    'types_match',
    'DefaultNameMatcher',
    'StrictNameMatcher',
    'build_name_matcher',
    'BestPropertyMatch',
    'MethodSignatureMatcher',
]
