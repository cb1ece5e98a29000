# Path: dto_link/process/matcher/scoring/signature_score.py
"""
Signature Score

Combines per-parameter pairing scores into one method score.
"""

import logging

from ....constants import (
    PERFECT_MATCH_VALUE,
    COVERAGE_WEIGHT,
    SCORE_PRECISION,
    PairingKind,
)
from ..models.match_result import ParameterPairing


class SignatureScorer:
    """
    Turns the pairings of one method into a score.

    - Every parameter paired exactly: PERFECT_MATCH_VALUE plus
      COVERAGE_WEIGHT times the share of writable DTO properties used.
    - Otherwise: the mean parameter score, which stays below
      PERFECT_MATCH_VALUE and drops with every unmatched parameter.

    A method without parameters is fully paired.

    Example:
        scorer = SignatureScorer()
        scorer.score(pairings, writable_count=2)   # 1.01 when both used
    """

    def __init__(self):
        """Initialize signature scorer."""
        self.logger = logging.getLogger('process.matcher.scoring.signature')

    def score(
        self,
        pairings: list[ParameterPairing],
        writable_count: int
    ) -> float:
        """
        Score one method.

        Args:
            pairings: Pairings for every parameter of the method
            writable_count: Number of writable DTO properties on offer

        Returns:
            Rounded score
        """
        if self.is_full_pairing(pairings):
            coverage = self.coverage(len(pairings), writable_count)
            return round(PERFECT_MATCH_VALUE + COVERAGE_WEIGHT * coverage, SCORE_PRECISION)

        total = sum(p.score for p in pairings)
        return round(total / len(pairings), SCORE_PRECISION)

    def is_full_pairing(self, pairings: list[ParameterPairing]) -> bool:
        """Check if every parameter was paired by name and type."""
        return all(p.kind == PairingKind.EXACT for p in pairings)

    def coverage(self, used_count: int, writable_count: int) -> float:
        """
        Share of writable DTO properties consumed by a method.

        Args:
            used_count: Properties the method uses
            writable_count: Writable properties available

        Returns:
            Value between 0.0 and 1.0 (1.0 when nothing is writable)
        """
        if writable_count == 0:
            return 1.0
        return used_count / writable_count


__all__ = ['SignatureScorer']
