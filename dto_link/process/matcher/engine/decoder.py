# Path: dto_link/process/matcher/engine/decoder.py
"""
DTO Decoder

The main orchestrator of the matching engine. Decodes one DTO against
its entity: flags the DTO properties that mirror entity keys, then
resolves which entity mutator method(s) can apply the DTO.

Method resolution runs three tiers, stopping at the first that applies:
1. Explicit configuration: every configured method name is resolved
   independently; problems are collected.
2. Naming convention: a method named after the DTO (suffix stripped)
   is accepted if its best overload pairs perfectly.
3. Default scan: the same name-derived candidates, accepting every
   perfect overload.
"""

from typing import Optional

from ....core.logger.ipo_logging import get_process_logger
from ....constants import DTO_NAME_SUFFIXES, Provenance
from ..models.descriptors import (
    DtoDescriptor,
    EntityDescriptor,
    MethodCandidate,
    PerDtoConfig,
    PropertyDescriptor,
)
from ..models.decoded_dto import DecodedDto, DtoPropertyInfo
from ..models.match_result import MethodMatch
from ..models.status import (
    ConfigurationNotFoundError,
    DecodeStatus,
    ImperfectMatchError,
)
from ..evaluators import (
    BaseNameMatcher,
    BestPropertyMatch,
    DefaultNameMatcher,
    MethodSignatureMatcher,
)
from ..scoring import Tiebreaker


def extract_method_name_from_dto_type(dto_type: str) -> str:
    """
    Guess a mutator method name from a DTO type name.

    Strips the first suffix in DTO_NAME_SUFFIXES that the name ends
    with (case-insensitive); otherwise returns the name unchanged.

    Args:
        dto_type: DTO type name, e.g. "OrderDto"

    Returns:
        Method name to look for, e.g. "Order"
    """
    lowered = dto_type.lower()
    for suffix in DTO_NAME_SUFFIXES:
        if lowered.endswith(suffix.lower()) and len(dto_type) > len(suffix):
            return dto_type[:-len(suffix)]
    return dto_type


class DtoDecoder:
    """
    Decodes DTOs into immutable DecodedDto descriptors.

    The decoder keeps no per-DTO state between calls apart from
    diagnostics; decoding the same input twice gives equal results.

    Example:
        decoder = DtoDecoder()
        decoded = decoder.decode(order_dto, order_entity)

        decoded.matched_setter_methods[0].method_name
        # "Order"
        decoded.status.is_valid
        # True
    """

    def __init__(
        self,
        name_matcher: Optional[BaseNameMatcher] = None,
        diagnostics: bool = True
    ):
        """
        Initialize DTO decoder.

        Args:
            name_matcher: Matcher for identifiers. Defaults to
                DefaultNameMatcher.
            diagnostics: Keep per-DTO diagnostics (default True)
        """
        self.logger = get_process_logger('matcher.decoder')
        self.name_matcher = name_matcher or DefaultNameMatcher()
        self.diagnostics = diagnostics
        self._decode_diagnostics: dict[str, dict] = {}

        self.property_matcher = BestPropertyMatch(self.name_matcher)
        self.signature_matcher = MethodSignatureMatcher(self.name_matcher)
        self.tiebreaker = Tiebreaker()

    def decode(
        self,
        dto: DtoDescriptor,
        entity: EntityDescriptor,
        config: Optional[PerDtoConfig] = None
    ) -> DecodedDto:
        """
        Decode one DTO.

        Args:
            dto: DTO descriptor
            entity: Descriptor of the entity the DTO is linked to
            config: Optional per-DTO configuration

        Returns:
            DecodedDto; problems are in its status, never raised
        """
        status = DecodeStatus()
        diag = {
            'dto_type': dto.dto_type,
            'entity_type': entity.entity_type,
            'tier': None,
            'candidates': [],
            'near_misses': [],
            'accepted': [],
        }

        property_infos = tuple(
            DtoPropertyInfo(
                name=prop.name,
                type_name=prop.type_name,
                access=prop.access,
                is_key_mirror=self.property_matcher.is_key_mirror(
                    prop, entity.key_properties
                ),
            )
            for prop in dto.properties
        )

        explicit = config is not None and config.has_update_methods
        matched: list[MethodMatch] = []

        if entity.supports_method_updates or explicit:
            writable = dto.writable_properties
            if explicit:
                diag['tier'] = Provenance.EXPLICITLY_CONFIGURED.value
                matched = self._match_explicit_methods(
                    dto, entity, config.update_methods, writable, status, diag
                )
            else:
                matched = self._match_by_dto_name(
                    dto, entity, writable, status, diag
                )
        else:
            self.logger.debug(
                f"{entity.entity_type} is not updated via methods; "
                f"skipping method matching for {dto.dto_type}"
            )

        diag['accepted'] = [m.candidate.render() for m in matched]
        if self.diagnostics:
            self._decode_diagnostics[dto.dto_type] = diag

        if status.is_valid:
            self.logger.info(
                f"[DECODED] {dto.dto_type} -> {entity.entity_type}: "
                f"{len(property_infos)} properties, "
                f"{len(matched)} setter method(s)"
            )
        else:
            self.logger.info(
                f"[DECODE FAIL] {dto.dto_type} -> {entity.entity_type}: "
                f"{len(status)} error(s)"
            )

        return DecodedDto(
            dto_type=dto.dto_type,
            linked_entity_type=entity.entity_type,
            property_infos=property_infos,
            matched_setter_methods=tuple(matched),
            errors=status.errors,
        )

    def _match_explicit_methods(
        self,
        dto: DtoDescriptor,
        entity: EntityDescriptor,
        method_names: tuple[str, ...],
        writable: list[PropertyDescriptor],
        status: DecodeStatus,
        diag: dict
    ) -> list[MethodMatch]:
        """
        Resolve configured method names, each independently.

        Args:
            dto: DTO being decoded
            entity: Linked entity
            method_names: Configured names, in order
            writable: Writable DTO properties
            status: Collects errors
            diag: Diagnostics for this DTO

        Returns:
            Accepted matches, one per resolvable name
        """
        result = []

        for method_name in method_names:
            candidates = self._find_methods_with_name(
                entity, method_name, dto, status, error_if_missing=True
            )
            if not candidates:
                continue

            ranked = self.signature_matcher.grade_all_methods(
                candidates, writable, Provenance.EXPLICITLY_CONFIGURED
            )
            diag['candidates'].extend(m.candidate.render() for m in ranked)
            best, tied = self.tiebreaker.resolve(ranked)

            if not best.is_perfect:
                self._record_near_miss(best, diag)
                status.add_error(ImperfectMatchError(
                    method_name,
                    closest_fit=best.render(),
                    dto_type=dto.dto_type,
                ))
                continue

            if tied:
                self.logger.warning(
                    f"{dto.dto_type}: {len(tied) + 1} overloads of "
                    f"{method_name} match equally well; using "
                    f"{best.candidate.render()}"
                )

            self.logger.info(
                f"  [MATCHED] {dto.dto_type} -> {best.candidate.render()} "
                f"(explicitly configured, score={best.score:.6f})"
            )
            result.append(best)

        return result

    def _match_by_dto_name(
        self,
        dto: DtoDescriptor,
        entity: EntityDescriptor,
        writable: list[PropertyDescriptor],
        status: DecodeStatus,
        diag: dict
    ) -> list[MethodMatch]:
        """
        Resolve by naming convention, falling back to a default scan.

        Args:
            dto: DTO being decoded
            entity: Linked entity
            writable: Writable DTO properties
            status: Collects errors
            diag: Diagnostics for this DTO

        Returns:
            Accepted matches (empty if none qualifies)
        """
        method_name = extract_method_name_from_dto_type(dto.dto_type)
        candidates = self._find_methods_with_name(
            entity, method_name, dto, status, error_if_missing=False
        )
        diag['candidates'] = [c.render() for c in candidates]

        # Tier 2: best convention match
        diag['tier'] = Provenance.CONVENTION_FROM_DTO_NAME.value
        if candidates:
            ranked = self.signature_matcher.grade_all_methods(
                candidates, writable, Provenance.CONVENTION_FROM_DTO_NAME
            )
            best, _ = self.tiebreaker.resolve(ranked)
            if best.is_perfect:
                self.logger.info(
                    f"  [MATCHED] {dto.dto_type} -> {best.candidate.render()} "
                    f"(by DTO name, score={best.score:.6f})"
                )
                return [best]

        # Tier 3: every perfect overload among the same candidates
        diag['tier'] = Provenance.DEFAULT_SCAN.value
        ranked = self.signature_matcher.grade_all_methods(
            candidates, writable, Provenance.DEFAULT_SCAN
        )
        accepted = [m for m in ranked if m.is_perfect]

        if accepted:
            for match in accepted:
                self.logger.info(
                    f"  [MATCHED] {dto.dto_type} -> {match.candidate.render()} "
                    f"(default scan, score={match.score:.6f})"
                )
        elif ranked:
            best = ranked[0]
            self._record_near_miss(best, diag)
            status.add_error(ImperfectMatchError(
                method_name,
                closest_fit=best.render(),
                dto_type=dto.dto_type,
                by_convention=True,
            ))
        else:
            self.logger.debug(
                f"  [NO SETTER] {dto.dto_type}: no method named {method_name} "
                f"on {entity.entity_type}"
            )

        return accepted

    def _find_methods_with_name(
        self,
        entity: EntityDescriptor,
        method_name: str,
        dto: DtoDescriptor,
        status: DecodeStatus,
        error_if_missing: bool
    ) -> list[MethodCandidate]:
        """
        Get the entity's mutator methods with an exact name.

        Args:
            entity: Entity to search
            method_name: Name to look for
            dto: DTO being decoded (for error context)
            status: Collects the not-found error
            error_if_missing: Add ConfigurationNotFoundError when none exist

        Returns:
            Matching methods in declaration order
        """
        methods = entity.get_methods_named(method_name)
        if not methods and error_if_missing:
            status.add_error(ConfigurationNotFoundError(
                method_name,
                entity.entity_type,
                dto_type=dto.dto_type,
            ))
        return methods

    def _record_near_miss(self, match: MethodMatch, diag: dict) -> None:
        diag['near_misses'].append({
            'method': match.candidate.render(),
            'score': match.score,
            'unmatched_parameters': match.unmatched_parameters,
        })
        self.logger.info(f"  [NEAR MISS] {match}")

    def get_decode_diagnostics(self) -> dict[str, dict]:
        """
        Get diagnostics for every DTO decoded so far.

        Returns:
            Dictionary mapping dto_type to:
            - tier: Last resolution tier reached
            - candidates: Methods considered
            - near_misses: Best imperfect candidates
            - accepted: Accepted method signatures
        """
        return self._decode_diagnostics.copy()


__all__ = ['DtoDecoder', 'extract_method_name_from_dto_type']
