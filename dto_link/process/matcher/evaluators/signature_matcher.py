# Path: dto_link/process/matcher/evaluators/signature_matcher.py
"""
Method Signature Matcher

Grades entity mutator methods against the writable properties of a
DTO. Each parameter is paired with a distinct DTO property by name and
type; the pairings are scored by SignatureScorer and the graded methods
are ranked best first.

Grading is deterministic: the same candidates, properties and name
matcher always give the same scores in the same order, which is what
lets "closest fit" diagnostics be trusted.
"""

import logging
from typing import Optional, Sequence

from ....constants import (
    PERFECT_MATCH_VALUE,
    NO_MATCH_VALUE,
    NAME_ONLY_PARAMETER_SCORE,
    PairingKind,
    Provenance,
)
from ..models.descriptors import (
    MethodCandidate,
    ParameterDescriptor,
    PropertyDescriptor,
)
from ..models.match_result import MethodMatch, ParameterPairing
from ..scoring import SignatureScorer, Tiebreaker
from .base_matcher import BaseNameMatcher, types_match


class MethodSignatureMatcher:
    """
    Grades mutator methods by how well DTO properties satisfy them.

    Pairing rules:
    - the largest 1:1 set of name and type matches -> EXACT (1.0)
    - then, per remaining parameter in declaration order, the first
      unused property matching by name -> NAME_ONLY (0.5)
    - else UNMATCHED (0.0)

    Example:
        matcher = MethodSignatureMatcher(DefaultNameMatcher())
        ranked = matcher.grade_all_methods(
            candidates=entity.get_methods_named("Order"),
            writable_properties=dto.writable_properties,
            provenance=Provenance.CONVENTION_FROM_DTO_NAME,
        )
        best = ranked[0]
    """

    def __init__(self, name_matcher: BaseNameMatcher):
        """
        Initialize signature matcher.

        Args:
            name_matcher: Matcher used to compare parameter and property names
        """
        self.logger = logging.getLogger('process.matcher.signature')
        self.name_matcher = name_matcher
        self.scorer = SignatureScorer()
        self.tiebreaker = Tiebreaker()

    def grade_all_methods(
        self,
        candidates: Sequence[MethodCandidate],
        writable_properties: Sequence[PropertyDescriptor],
        provenance: Provenance
    ) -> list[MethodMatch]:
        """
        Grade every candidate method.

        Args:
            candidates: Methods to grade, in declaration order
            writable_properties: DTO properties that may feed parameters
            provenance: Resolution tier the candidates were found by

        Returns:
            MethodMatch list, best score first, ties in declaration order
        """
        matches = [
            self.grade_method(candidate, writable_properties, provenance, index)
            for index, candidate in enumerate(candidates)
        ]
        ranked = self.tiebreaker.rank(matches)

        for match in ranked:
            self.logger.debug(f"  [GRADED] {match}")

        return ranked

    def grade_method(
        self,
        candidate: MethodCandidate,
        writable_properties: Sequence[PropertyDescriptor],
        provenance: Provenance,
        declaration_index: int = 0
    ) -> MethodMatch:
        """
        Grade one candidate method.

        Args:
            candidate: Method to grade
            writable_properties: DTO properties that may feed parameters
            provenance: Resolution tier the candidate was found by
            declaration_index: Position among the candidates

        Returns:
            MethodMatch with score and pairings
        """
        available = list(writable_properties)
        exact = self._match_exact(candidate.parameters, available)
        used = set(exact.values())
        pairings = []

        for index, parameter in enumerate(candidate.parameters):
            if index in exact:
                pairings.append(ParameterPairing(
                    parameter=parameter,
                    dto_property=available[exact[index]],
                    kind=PairingKind.EXACT,
                    score=PERFECT_MATCH_VALUE,
                ))
                continue

            name_only = self._find_name_only(parameter, available, used)
            if name_only is not None:
                used.add(name_only)
                pairings.append(ParameterPairing(
                    parameter=parameter,
                    dto_property=available[name_only],
                    kind=PairingKind.NAME_ONLY,
                    score=NAME_ONLY_PARAMETER_SCORE,
                ))
            else:
                pairings.append(ParameterPairing(
                    parameter=parameter,
                    dto_property=None,
                    kind=PairingKind.UNMATCHED,
                    score=NO_MATCH_VALUE,
                ))

        score = self.scorer.score(pairings, len(available))

        return MethodMatch(
            candidate=candidate,
            score=score,
            provenance=provenance,
            declaration_index=declaration_index,
            pairings=tuple(pairings),
            unused_properties=tuple(
                p.name for i, p in enumerate(available) if i not in used
            ),
        )

    def _match_exact(
        self,
        parameters: Sequence[ParameterDescriptor],
        available: list[PropertyDescriptor]
    ) -> dict[int, int]:
        """
        Pair as many parameters as possible by name and type, 1:1.

        Runs augmenting-path bipartite matching, so a parameter that
        took a property another parameter needs is moved to one of its
        other options instead of leaving the second parameter unmatched.

        Args:
            parameters: Method parameters in declaration order
            available: Writable DTO properties in declaration order

        Returns:
            Dictionary mapping parameter index to property index
        """
        edges = [
            [
                j for j, prop in enumerate(available)
                if self.name_matcher.compare(parameter.name, prop.name) >= PERFECT_MATCH_VALUE
                and types_match(parameter.type_name, prop.type_name)
            ]
            for parameter in parameters
        ]
        owner: dict[int, int] = {}

        for index in range(len(parameters)):
            self._augment(index, edges, owner, set())

        return {param: prop for prop, param in owner.items()}

    def _augment(
        self,
        index: int,
        edges: list[list[int]],
        owner: dict[int, int],
        visited: set[int]
    ) -> bool:
        for prop in edges[index]:
            if prop in visited:
                continue
            visited.add(prop)
            if prop not in owner or self._augment(owner[prop], edges, owner, visited):
                owner[prop] = index
                return True
        return False

    def _find_name_only(
        self,
        parameter: ParameterDescriptor,
        available: list[PropertyDescriptor],
        used: set[int]
    ) -> Optional[int]:
        """Get the first unused property that matches by name alone."""
        for j, prop in enumerate(available):
            if j in used:
                continue
            if self.name_matcher.compare(parameter.name, prop.name) >= PERFECT_MATCH_VALUE:
                return j
        return None


__all__ = ['MethodSignatureMatcher']
