# Path: dto_link/__init__.py
"""
dto_link - DTO to Entity Decoding

Works out how a flat DTO maps onto an entity without hand-written
mapping code: which DTO properties mirror entity keys, and which entity
mutator method applies the DTO's writable properties.
"""

from .constants import PERFECT_MATCH_VALUE, PropertyAccess, Provenance
from .process.matcher import (
    DtoDecoder,
    DecodedDtoRegistry,
    DescriptorLoader,
    setup_single_dto,
    DefaultNameMatcher,
    StrictNameMatcher,
    build_name_matcher,
    PropertyDescriptor,
    ParameterDescriptor,
    MethodCandidate,
    EntityDescriptor,
    DtoDescriptor,
    PerDtoConfig,
    DescriptorSet,
    DecodedDto,
    DecodeStatus,
    SetupError,
)

__version__ = '1.0.0'

__all__ = [
    'PERFECT_MATCH_VALUE',
    'PropertyAccess',
    'Provenance',
    'DtoDecoder',
    'DecodedDtoRegistry',
    'DescriptorLoader',
    'setup_single_dto',
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
    'DecodedDto',
    'DecodeStatus',
    'SetupError',
]
