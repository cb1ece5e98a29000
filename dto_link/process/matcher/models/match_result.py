# Path: dto_link/process/matcher/models/match_result.py
"""
Match Result Models

Models representing the result of grading an entity mutator method
against the writable properties of a DTO.
"""

from typing import Optional
from dataclasses import dataclass, field

from ....constants import PERFECT_MATCH_VALUE, PairingKind, Provenance
from .descriptors import MethodCandidate, ParameterDescriptor, PropertyDescriptor


@dataclass(frozen=True)
class ParameterPairing:
    """
    How one method parameter was satisfied.

    Attributes:
        parameter: The method parameter
        dto_property: The DTO property paired with it (None if unmatched)
        kind: Exact, name only, or unmatched
        score: Contribution of this parameter (0.0 - 1.0)
    """
    parameter: ParameterDescriptor
    dto_property: Optional[PropertyDescriptor]
    kind: PairingKind
    score: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'parameter': self.parameter.name,
            'dto_property': self.dto_property.name if self.dto_property else None,
            'kind': self.kind.value,
            'score': self.score,
        }


@dataclass(frozen=True)
class MethodMatch:
    """
    A graded mutator method.

    Attributes:
        candidate: The entity method that was graded
        score: Match score (>= PERFECT_MATCH_VALUE means usable)
        provenance: Which resolution tier put the method forward
        declaration_index: Position of the method among its candidates,
            used to break ties
        pairings: Per-parameter pairings, in parameter order
        unused_properties: Writable DTO properties the method does not use
    """
    candidate: MethodCandidate
    score: float
    provenance: Provenance
    declaration_index: int = 0
    pairings: tuple[ParameterPairing, ...] = field(default_factory=tuple)
    unused_properties: tuple[str, ...] = field(default_factory=tuple)

    @property
    def method_name(self) -> str:
        return self.candidate.name

    @property
    def is_perfect(self) -> bool:
        """Check if the match is good enough to bind."""
        return self.score >= PERFECT_MATCH_VALUE

    @property
    def unmatched_parameters(self) -> list[str]:
        """Names of parameters without an exact pairing."""
        return [
            p.parameter.name for p in self.pairings
            if p.kind != PairingKind.EXACT
        ]

    def property_for_parameter(self, parameter_name: str) -> Optional[str]:
        """
        Get the DTO property that feeds a parameter.

        Args:
            parameter_name: Method parameter name

        Returns:
            DTO property name, or None if the parameter is unmatched
        """
        for pairing in self.pairings:
            if pairing.parameter.name == parameter_name and pairing.dto_property:
                return pairing.dto_property.name
        return None

    def render(self) -> str:
        """
        Render for diagnostics.

        Example:
            "Order(decimal amount, string status) (score=1.010000,
             found by convention_from_dto_name)"
        """
        text = (
            f"{self.candidate.render()} (score={self.score:.6f}, "
            f"found by {self.provenance.value})"
        )
        missing = self.unmatched_parameters
        if missing:
            text += f", unmatched parameters: {', '.join(missing)}"
        return text

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'method': self.candidate.render(),
            'score': self.score,
            'provenance': self.provenance.value,
            'declaration_index': self.declaration_index,
            'pairings': [p.to_dict() for p in self.pairings],
            'unused_properties': list(self.unused_properties),
        }


__all__ = [
    'ParameterPairing',
    'MethodMatch',
]
