# Path: dto_link/process/matcher/models/decoded_dto.py
"""
Decoded DTO Models

The decoded DTO is the primary output of the decoder. It describes each
DTO property (with its key-mirror flag) and the mutator methods that
can apply the DTO back onto its entity.
"""

from typing import Optional
from dataclasses import dataclass, field

from ....constants import PropertyAccess, Provenance
from .match_result import MethodMatch
from .status import DecodeError, DecodeStatus


@dataclass(frozen=True)
class DtoPropertyInfo:
    """
    One decoded DTO property.

    Attributes:
        name: Property name
        type_name: Declared type name
        access: Read-only or writable
        is_key_mirror: True if the name matches one of the entity's
            key properties at the perfect-match threshold
    """
    name: str
    type_name: str
    access: PropertyAccess
    is_key_mirror: bool = False

    @property
    def is_writable(self) -> bool:
        return self.access == PropertyAccess.WRITABLE

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'type_name': self.type_name,
            'access': self.access.value,
            'is_key_mirror': self.is_key_mirror,
        }


@dataclass(frozen=True)
class DecodedDto:
    """
    Immutable description of a DTO linked to an entity.

    Built once by DtoDecoder and shared read-only afterwards.

    Attributes:
        dto_type: DTO type name
        linked_entity_type: Entity type name
        property_infos: Decoded properties, in DTO declaration order
        matched_setter_methods: Accepted mutator bindings (every one
            scores at least PERFECT_MATCH_VALUE); empty for a DTO that
            is read-only as far as methods are concerned
        errors: Errors collected while decoding (read-only)
    """
    dto_type: str
    linked_entity_type: str
    property_infos: tuple[DtoPropertyInfo, ...] = field(default_factory=tuple)
    matched_setter_methods: tuple[MethodMatch, ...] = field(default_factory=tuple)
    errors: tuple[DecodeError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def status(self) -> DecodeStatus:
        """
        Get the decode errors as a new DecodeStatus.

        Each call builds a fresh status, so adding errors to it never
        changes this DecodedDto.
        """
        status = DecodeStatus()
        for error in self.errors:
            status.add_error(error)
        return status

    @property
    def key_mirror_properties(self) -> list[DtoPropertyInfo]:
        """Properties that mirror entity keys."""
        return [p for p in self.property_infos if p.is_key_mirror]

    @property
    def writable_properties(self) -> list[DtoPropertyInfo]:
        return [p for p in self.property_infos if p.is_writable]

    @property
    def has_setter_methods(self) -> bool:
        return bool(self.matched_setter_methods)

    def get_property(self, name: str) -> Optional[DtoPropertyInfo]:
        """Get a decoded property by name."""
        for prop in self.property_infos:
            if prop.name == name:
                return prop
        return None

    def get_setter_method(self, method_name: str) -> Optional[MethodMatch]:
        """
        Get the first accepted binding with this method name.

        Args:
            method_name: Mutator method name

        Returns:
            MethodMatch or None
        """
        for match in self.matched_setter_methods:
            if match.method_name == method_name:
                return match
        return None

    def setter_methods_by(self, provenance: Provenance) -> list[MethodMatch]:
        """Get accepted bindings produced by one resolution tier."""
        return [
            m for m in self.matched_setter_methods
            if m.provenance == provenance
        ]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'dto_type': self.dto_type,
            'linked_entity_type': self.linked_entity_type,
            'property_infos': [p.to_dict() for p in self.property_infos],
            'matched_setter_methods': [
                m.to_dict() for m in self.matched_setter_methods
            ],
            'status': self.status.to_dict(),
        }


__all__ = [
    'DtoPropertyInfo',
    'DecodedDto',
]
