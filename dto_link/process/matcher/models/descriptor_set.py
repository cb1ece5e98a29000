# Path: dto_link/process/matcher/models/descriptor_set.py
"""
Descriptor Set

A collection of entity and DTO descriptors, with per-DTO configuration,
ready to be registered in one pass.
"""

from typing import Optional
from dataclasses import dataclass, field

from .descriptors import DtoDescriptor, EntityDescriptor, PerDtoConfig


@dataclass
class DescriptorSet:
    """
    Entities and DTOs to register together.

    Attributes:
        entities: Entity descriptors by entity type name
        dtos: DTO descriptors by DTO type name, in load order
        configs: Per-DTO configuration by DTO type name
    """
    entities: dict[str, EntityDescriptor] = field(default_factory=dict)
    dtos: dict[str, DtoDescriptor] = field(default_factory=dict)
    configs: dict[str, PerDtoConfig] = field(default_factory=dict)

    def add_entity(self, entity: EntityDescriptor) -> None:
        self.entities[entity.entity_type] = entity

    def add_dto(
        self,
        dto: DtoDescriptor,
        config: Optional[PerDtoConfig] = None
    ) -> None:
        """
        Add a DTO and its optional configuration.

        A DTO added twice replaces the earlier one (last wins).
        """
        self.dtos[dto.dto_type] = dto
        if config is not None:
            self.configs[dto.dto_type] = config
        else:
            self.configs.pop(dto.dto_type, None)

    def get_entity(self, entity_type: str) -> Optional[EntityDescriptor]:
        return self.entities.get(entity_type)

    def get_config(self, dto_type: str) -> Optional[PerDtoConfig]:
        return self.configs.get(dto_type)

    def merge(self, other: 'DescriptorSet') -> 'DescriptorSet':
        """
        Merge another set into this one; entries in other win.

        Returns:
            self
        """
        self.entities.update(other.entities)
        for dto_type, dto in other.dtos.items():
            self.add_dto(dto, other.get_config(dto_type))
        return self

    def __len__(self) -> int:
        return len(self.dtos)


__all__ = ['DescriptorSet']
