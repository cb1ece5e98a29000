# Path: dto_link/process/matcher/__init__.py
"""
Matching Engine - DTO to Entity Decoding

Decides how a flat DTO corresponds to an entity: which DTO properties
mirror the entity's keys, and which entity mutator method (if any)
applies the DTO's writable properties.

Core Components:
    - DtoDecoder: Main orchestrator (three-tier method resolution)
    - Evaluators: Name, key-property and method-signature matchers
    - Scoring: Signature scores and tie-breaking
    - Models: Descriptors, matches, decoded DTOs, status

Key Principle:
    A binding is only accepted at PERFECT_MATCH_VALUE. Anything less is
    reported with its closest fit instead of being guessed.

Example:
    from dto_link.process.matcher import DecodedDtoRegistry, DescriptorLoader

    registry = DecodedDtoRegistry()
    status = registry.register_all(DescriptorLoader(path).load_all())
    status.raise_if_invalid()
    registry.freeze()
"""

from .engine import (
    DtoDecoder,
    DecodedDtoRegistry,
    DescriptorLoader,
    setup_single_dto,
)
from .evaluators import (
    BaseNameMatcher,
    DefaultNameMatcher,
    StrictNameMatcher,
    build_name_matcher,
)
from .models import (
    PropertyDescriptor,
    ParameterDescriptor,
    MethodCandidate,
    EntityDescriptor,
    DtoDescriptor,
    PerDtoConfig,
    DescriptorSet,
    MethodMatch,
    DtoPropertyInfo,
    DecodedDto,
    DecodeStatus,
    DecodeError,
    ConfigurationNotFoundError,
    ImperfectMatchError,
    UnknownEntityError,
    SetupError,
    RegistryFrozenError,
    DescriptorLoadError,
)

__all__ = [
    'DtoDecoder',
    'DecodedDtoRegistry',
    'DescriptorLoader',
    'setup_single_dto',
    'BaseNameMatcher',
    'DefaultNameMatcher',
    'StrictNameMatcher',
    'build_name_matcher',
    'PropertyDescriptor',
    'ParameterDescriptor',
    'MethodCandidate',
    'EntityDescriptor',
    'DtoDescriptor',
    'PerDtoConfig',
    'DescriptorSet',
    'MethodMatch',
    'DtoPropertyInfo',
    'DecodedDto',
    'DecodeStatus',
    'DecodeError',
    'ConfigurationNotFoundError',
    'ImperfectMatchError',
    'UnknownEntityError',
    'SetupError',
    'RegistryFrozenError',
    'DescriptorLoadError',
]
