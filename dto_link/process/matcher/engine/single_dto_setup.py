# Path: dto_link/process/matcher/engine/single_dto_setup.py
"""
Single DTO Setup

Sets up one DTO against a collection of entities, typically inside a
unit test of a service that uses the DTO. Fails loudly: any decode
error raises SetupError listing every problem.
"""

from typing import Iterable, Optional

from ..models.descriptors import DtoDescriptor, EntityDescriptor, PerDtoConfig
from ..models.status import DecodeStatus, UnknownEntityError
from ..evaluators import BaseNameMatcher
from .decoder import DtoDecoder
from .registry import DecodedDtoRegistry


def setup_single_dto(
    dto: DtoDescriptor,
    entities: Iterable[EntityDescriptor],
    config: Optional[PerDtoConfig] = None,
    name_matcher: Optional[BaseNameMatcher] = None,
    registry: Optional[DecodedDtoRegistry] = None
) -> DecodedDtoRegistry:
    """
    Register one DTO, raising if it does not decode cleanly.

    Args:
        dto: DTO to set up
        entities: Entity descriptors; the DTO's linked entity must be
            among them
        config: Optional per-DTO configuration
        name_matcher: Optional name matcher (ignored when registry given)
        registry: Existing registry to add to. A new one is created
            when omitted.

    Returns:
        Registry containing the decoded DTO (not frozen, so further
        DTOs can be added)

    Raises:
        SetupError: If the linked entity is missing or decoding
            collected errors

    Example:
        registry = setup_single_dto(order_dto, [order_entity])
        decoded = registry['OrderDto']
    """
    if registry is None:
        registry = DecodedDtoRegistry(DtoDecoder(name_matcher))

    status = DecodeStatus()
    entity = next(
        (e for e in entities if e.entity_type == dto.linked_entity),
        None
    )

    if entity is None:
        status.add_error(UnknownEntityError(dto.linked_entity, dto_type=dto.dto_type))
    else:
        status.combine_statuses(registry.register(dto, entity, config))

    status.raise_if_invalid()
    return registry


__all__ = ['setup_single_dto']
