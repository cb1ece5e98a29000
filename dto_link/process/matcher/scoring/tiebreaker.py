# Path: dto_link/process/matcher/scoring/tiebreaker.py
"""
Tiebreaker

Orders graded methods and resolves ties between equal scores.
"""

import logging

from ..models.match_result import MethodMatch


class Tiebreaker:
    """
    Orders method matches best first.

    Equal scores keep declaration order, so ranking the same input
    always gives the same result.

    Example:
        tiebreaker = Tiebreaker()
        ranked = tiebreaker.rank(matches)
        best, tied = tiebreaker.resolve(ranked)
    """

    def __init__(self):
        """Initialize tiebreaker."""
        self.logger = logging.getLogger('process.matcher.scoring.tiebreaker')

    def rank(self, matches: list[MethodMatch]) -> list[MethodMatch]:
        """
        Sort matches by score (descending), then declaration order.

        Args:
            matches: Graded methods

        Returns:
            New, ordered list
        """
        return sorted(
            matches,
            key=lambda m: (-m.score, m.declaration_index)
        )

    def resolve(
        self,
        ranked: list[MethodMatch]
    ) -> tuple[MethodMatch, list[MethodMatch]]:
        """
        Pick the winner from a ranked list.

        Args:
            ranked: Output of rank()

        Returns:
            Tuple of (best match, other matches sharing its score)

        Raises:
            ValueError: If there is nothing to resolve
        """
        if not ranked:
            raise ValueError("No matches to resolve")

        best = ranked[0]
        tied = [m for m in ranked[1:] if m.score == best.score]

        if tied:
            self.logger.debug(
                f"Tie between {len(tied) + 1} overloads of "
                f"{best.method_name} at score {best.score}; "
                f"keeping first declared"
            )

        return best, tied


__all__ = ['Tiebreaker']
