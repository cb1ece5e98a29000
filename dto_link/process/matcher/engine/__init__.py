# Path: dto_link/process/matcher/engine/__init__.py
"""
Matching Engine Core

Core components of the matching engine:
- DtoDecoder: Decodes one DTO against its entity
- DecodedDtoRegistry: Holds decoded DTOs after setup
- DescriptorLoader: Loads descriptors from YAML
- setup_single_dto: One-DTO setup for unit tests
"""

from .decoder import DtoDecoder, extract_method_name_from_dto_type
from .descriptor_loader import DescriptorLoader
from .registry import DecodedDtoRegistry
from .single_dto_setup import setup_single_dto

__all__ = [
    'DtoDecoder',
    'extract_method_name_from_dto_type',
    'DescriptorLoader',
    'DecodedDtoRegistry',
    'setup_single_dto',
]
