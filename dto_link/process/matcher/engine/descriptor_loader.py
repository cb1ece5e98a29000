# Path: dto_link/process/matcher/engine/descriptor_loader.py
"""
Descriptor Loader

Loads entity and DTO descriptors from YAML files.
Validates the content against the Pydantic descriptor models.

File layout:

    entities:
      - entity_type: Order
        key_properties: [OrderId]
        properties:
          - {name: OrderId, type: int}
          - {name: Amount, type: decimal}
        mutator_methods:
          - name: Order
            parameters:
              - {name: amount, type: decimal}

    dtos:
      - dto_type: OrderDto
        linked_entity: Order
        update_methods: "Order"        # optional, string or list
        properties:
          - {name: OrderId, type: int, access: read_only}
          - {name: Amount, type: decimal}
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ....core.logger.ipo_logging import get_input_logger
from ..models.descriptors import (
    DtoDescriptor,
    EntityDescriptor,
    PerDtoConfig,
)
from ..models.descriptor_set import DescriptorSet
from ..models.status import DescriptorLoadError


YAML_PATTERNS = ('*.yaml', '*.yml')


class DescriptorLoader:
    """
    Loads descriptor sets from YAML files.

    Example:
        loader = DescriptorLoader(Path('descriptors'))
        descriptors = loader.load_all()

        # Load single file
        descriptors = loader.load_file(Path('descriptors/orders.yaml'))
    """

    def __init__(self, descriptor_dir: Optional[Path] = None):
        """
        Initialize descriptor loader.

        Args:
            descriptor_dir: Directory scanned by load_all()
        """
        self.logger = get_input_logger('descriptor_loader')
        self.descriptor_dir = Path(descriptor_dir) if descriptor_dir else None
        self._cache: Optional[DescriptorSet] = None

    def load_all(self, use_cache: bool = True) -> DescriptorSet:
        """
        Load every YAML file under the descriptor directory.

        Files are read in sorted path order; later files win on
        duplicate entity or DTO names.

        Args:
            use_cache: Whether to use cached results

        Returns:
            Combined DescriptorSet

        Raises:
            DescriptorLoadError: If any file is invalid
        """
        if use_cache and self._cache is not None:
            return self._cache

        descriptors = DescriptorSet()

        if self.descriptor_dir is None or not self.descriptor_dir.exists():
            self.logger.warning(
                f"Descriptor directory not found: {self.descriptor_dir}"
            )
            return descriptors

        yaml_files = sorted(
            path
            for pattern in YAML_PATTERNS
            for path in self.descriptor_dir.rglob(pattern)
        )
        self.logger.info(f"Found {len(yaml_files)} descriptor files")

        for yaml_file in yaml_files:
            loaded = self.load_file(yaml_file)
            for dto_type in loaded.dtos:
                if dto_type in descriptors.dtos:
                    self.logger.warning(
                        f"Duplicate DTO {dto_type} in {yaml_file}; "
                        f"replacing earlier definition"
                    )
            descriptors.merge(loaded)

        self.logger.info(
            f"Loaded {len(descriptors.entities)} entities and "
            f"{len(descriptors.dtos)} DTOs"
        )
        self._cache = descriptors
        return descriptors

    def load_file(self, file_path: Path) -> DescriptorSet:
        """
        Load a single descriptor file.

        Args:
            file_path: Path to YAML file

        Returns:
            DescriptorSet with the file's entities and DTOs

        Raises:
            DescriptorLoadError: If the file cannot be read or is invalid
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise DescriptorLoadError(f"Cannot read {file_path}: {e}") from e
        except yaml.YAMLError as e:
            raise DescriptorLoadError(f"YAML parse error in {file_path}: {e}") from e

        if data is None:
            self.logger.warning(f"Empty file: {file_path}")
            return DescriptorSet()

        return self.parse(data, source=str(file_path))

    def parse(self, data: dict, source: str = '<memory>') -> DescriptorSet:
        """
        Build a DescriptorSet from already-parsed YAML data.

        Args:
            data: Dictionary with 'entities' and/or 'dtos' lists
            source: Where the data came from (for error messages)

        Returns:
            DescriptorSet

        Raises:
            DescriptorLoadError: If the data does not match the models
        """
        if not isinstance(data, dict):
            raise DescriptorLoadError(
                f"{source}: expected a mapping with 'entities' and 'dtos'"
            )

        descriptors = DescriptorSet()

        for entry in data.get('entities') or []:
            descriptors.add_entity(
                self._validate(EntityDescriptor, entry, source)
            )

        for entry in data.get('dtos') or []:
            dto, config = self._parse_dto(entry, source)
            descriptors.add_dto(dto, config)

        self.logger.debug(
            f"{source}: {len(descriptors.entities)} entities, "
            f"{len(descriptors.dtos)} DTOs"
        )
        return descriptors

    def _parse_dto(
        self,
        entry: dict,
        source: str
    ) -> tuple[DtoDescriptor, Optional[PerDtoConfig]]:
        """Split a DTO entry into its descriptor and configuration."""
        if not isinstance(entry, dict):
            raise DescriptorLoadError(f"{source}: DTO entry must be a mapping")

        entry = dict(entry)
        update_methods = entry.pop('update_methods', None)

        dto = self._validate(DtoDescriptor, entry, source)
        config = None
        if update_methods is not None:
            config = self._validate(
                PerDtoConfig, {'update_methods': update_methods}, source
            )
        return dto, config

    def _validate(
        self,
        model: type,
        entry: Union[dict, object],
        source: str
    ):
        try:
            return model.model_validate(entry)
        except ValidationError as e:
            raise DescriptorLoadError(
                f"{source}: invalid {model.__name__}: {e}"
            ) from e

    def clear_cache(self) -> None:
        self._cache = None


__all__ = ['DescriptorLoader']
