# Path: dto_link/process/matcher/engine/registry.py
"""
Decoded DTO Registry

Holds the DecodedDto for every registered DTO type. Populated during an
explicit setup phase, then frozen; after freeze() the registry is
read-only and can be shared without locking.
"""

from typing import Iterator, Optional

from ....core.logger.ipo_logging import get_process_logger
from ..models.descriptors import DtoDescriptor, EntityDescriptor, PerDtoConfig
from ..models.descriptor_set import DescriptorSet
from ..models.decoded_dto import DecodedDto
from ..models.status import (
    DecodeStatus,
    RegistryFrozenError,
    UnknownEntityError,
)
from .decoder import DtoDecoder


class DecodedDtoRegistry:
    """
    Registry of decoded DTOs keyed by DTO type name.

    Registering a DTO type twice keeps the last registration; callers
    that register repeatedly must pass the same configuration each time.

    Example:
        registry = DecodedDtoRegistry()
        status = registry.register_all(descriptors)
        status.raise_if_invalid()
        registry.freeze()

        decoded = registry.get('OrderDto')
    """

    def __init__(self, decoder: Optional[DtoDecoder] = None):
        """
        Initialize registry.

        Args:
            decoder: Decoder used by register(). Defaults to DtoDecoder().
        """
        self.logger = get_process_logger('matcher.registry')
        self.decoder = decoder or DtoDecoder()
        self._decoded: dict[str, DecodedDto] = {}
        self._frozen = False

    def register(
        self,
        dto: DtoDescriptor,
        entity: EntityDescriptor,
        config: Optional[PerDtoConfig] = None
    ) -> DecodeStatus:
        """
        Decode a DTO and publish it.

        Args:
            dto: DTO descriptor
            entity: Entity the DTO is linked to
            config: Optional per-DTO configuration

        Returns:
            Status of this DTO's decode

        Raises:
            RegistryFrozenError: If the registry was frozen
        """
        self._check_not_frozen()

        decoded = self.decoder.decode(dto, entity, config)
        if dto.dto_type in self._decoded:
            self.logger.warning(
                f"{dto.dto_type} registered again; replacing earlier entry"
            )
        self._decoded[dto.dto_type] = decoded

        return decoded.status

    def register_all(self, descriptors: DescriptorSet) -> DecodeStatus:
        """
        Register every DTO in a descriptor set.

        DTOs linked to an unknown entity are not registered; an
        UnknownEntityError is collected for each.

        Args:
            descriptors: Entities, DTOs and configuration

        Returns:
            Combined status of every DTO

        Raises:
            RegistryFrozenError: If the registry was frozen
        """
        self._check_not_frozen()
        status = DecodeStatus()

        for dto_type, dto in descriptors.dtos.items():
            entity = descriptors.get_entity(dto.linked_entity)
            if entity is None:
                status.add_error(UnknownEntityError(dto.linked_entity, dto_type=dto_type))
                continue
            status.combine_statuses(
                self.register(dto, entity, descriptors.get_config(dto_type))
            )

        self.logger.info(
            f"Registered {len(descriptors.dtos)} DTOs: "
            f"{len(status)} error(s)"
        )
        return status

    def freeze(self) -> None:
        """End the setup phase; further registration raises."""
        self._frozen = True
        self.logger.debug(f"Registry frozen with {len(self._decoded)} DTOs")

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, dto_type: str) -> Optional[DecodedDto]:
        """Get the decoded DTO for a type, or None."""
        return self._decoded.get(dto_type)

    def dto_types(self) -> list[str]:
        """Registered DTO type names, in registration order."""
        return list(self._decoded)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                "Registry is frozen; register DTOs during setup only"
            )

    def __getitem__(self, dto_type: str) -> DecodedDto:
        return self._decoded[dto_type]

    def __contains__(self, dto_type: object) -> bool:
        return dto_type in self._decoded

    def __iter__(self) -> Iterator[DecodedDto]:
        return iter(list(self._decoded.values()))

    def __len__(self) -> int:
        return len(self._decoded)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            dto_type: decoded.to_dict()
            for dto_type, decoded in self._decoded.items()
        }


__all__ = ['DecodedDtoRegistry']
