# Path: dto_link/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the DTO decoder:
- Descriptors: DTO, entity and per-DTO configuration inputs
- MethodMatch: Result of grading one mutator method
- DecodedDto: Complete decoded description of a DTO
- DecodeStatus: Collected decode errors
"""

from .descriptors import (
    PropertyDescriptor,
    ParameterDescriptor,
    MethodCandidate,
    EntityDescriptor,
    DtoDescriptor,
    PerDtoConfig,
)

from .descriptor_set import DescriptorSet

from .match_result import (
    ParameterPairing,
    MethodMatch,
)

from .decoded_dto import (
    DtoPropertyInfo,
    DecodedDto,
)

from .status import (
    DecodeError,
    ConfigurationNotFoundError,
    ImperfectMatchError,
    UnknownEntityError,
    SetupError,
    RegistryFrozenError,
    DescriptorLoadError,
    DecodeStatus,
)

__all__ = [
    # Descriptors
    'PropertyDescriptor',
    'ParameterDescriptor',
    'MethodCandidate',
    'EntityDescriptor',
    'DtoDescriptor',
    'PerDtoConfig',
    'DescriptorSet',
    # Match Result
    'ParameterPairing',
    'MethodMatch',
    # Decoded DTO
    'DtoPropertyInfo',
    'DecodedDto',
    # Status
    'DecodeError',
    'ConfigurationNotFoundError',
    'ImperfectMatchError',
    'UnknownEntityError',
    'SetupError',
    'RegistryFrozenError',
    'DescriptorLoadError',
    'DecodeStatus',
]
