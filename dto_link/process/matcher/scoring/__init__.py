# Path: dto_link/process/matcher/scoring/__init__.py
"""
Scoring Module

Components for scoring graded methods:
- SignatureScorer: Combines parameter pairings into a method score
- Tiebreaker: Orders matches and resolves equal scores
"""

from .signature_score import SignatureScorer
from .tiebreaker import Tiebreaker

__all__ = [
    'SignatureScorer',
    'Tiebreaker',
]
