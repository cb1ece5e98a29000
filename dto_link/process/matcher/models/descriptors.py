# Path: dto_link/process/matcher/models/descriptors.py
"""
Descriptor Models

Pydantic models describing the DTO and entity types handed to the
decoder. These are explicit, statically declared descriptions (built in
code or loaded from YAML); the decoder never inspects live classes.

All models are frozen: once built, a descriptor is shared read-only.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ....constants import PropertyAccess, UPDATE_METHODS_SEPARATOR


DESCRIPTOR_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# MEMBERS
# =============================================================================

class PropertyDescriptor(BaseModel):
    """A property on a DTO or entity type."""
    model_config = DESCRIPTOR_CONFIG

    name: str = Field(
        min_length=1,
        description="Property name as declared on the type"
    )
    type_name: str = Field(
        alias='type',
        min_length=1,
        description="Declared type name (e.g., 'int', 'string', 'decimal')"
    )
    access: PropertyAccess = Field(
        default=PropertyAccess.WRITABLE,
        description="Whether the property can be written back"
    )

    @property
    def is_writable(self) -> bool:
        """Check if this property takes part in method matching."""
        return self.access == PropertyAccess.WRITABLE

    def render(self) -> str:
        return f"{self.type_name} {self.name}"


class ParameterDescriptor(BaseModel):
    """A parameter of an entity mutator method."""
    model_config = DESCRIPTOR_CONFIG

    name: str = Field(
        min_length=1,
        description="Parameter name"
    )
    type_name: str = Field(
        alias='type',
        min_length=1,
        description="Declared parameter type name"
    )

    def render(self) -> str:
        return f"{self.type_name} {self.name}"


class MethodCandidate(BaseModel):
    """
    A public mutator method available on an entity.

    Example:
        MethodCandidate(
            name="Order",
            parameters=[
                ParameterDescriptor(name="amount", type_name="decimal"),
                ParameterDescriptor(name="status", type_name="string"),
            ]
        ).render()
        # "Order(decimal amount, string status)"
    """
    model_config = DESCRIPTOR_CONFIG

    name: str = Field(
        min_length=1,
        description="Method name"
    )
    parameters: tuple[ParameterDescriptor, ...] = Field(
        default=(),
        description="Parameters in declaration order"
    )

    def render(self) -> str:
        """Render as a signature, used in diagnostics."""
        params = ', '.join(p.render() for p in self.parameters)
        return f"{self.name}({params})"

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# TYPES
# =============================================================================

class EntityDescriptor(BaseModel):
    """
    Everything the decoder needs to know about an entity type.

    Attributes:
        entity_type: Entity type name
        properties: Entity properties in declaration order
        key_properties: Names of the identity (primary key) properties
        mutator_methods: Public methods that apply new values
        supports_method_updates: Whether the entity is generally updated
            through methods (when False, only explicitly configured
            update methods are matched)
    """
    model_config = DESCRIPTOR_CONFIG

    entity_type: str = Field(
        min_length=1,
        description="Entity type name"
    )
    properties: tuple[PropertyDescriptor, ...] = Field(
        default=(),
        description="Entity properties in declaration order"
    )
    key_properties: tuple[str, ...] = Field(
        default=(),
        description="Names of identity-bearing properties"
    )
    mutator_methods: tuple[MethodCandidate, ...] = Field(
        default=(),
        description="Public mutator methods in declaration order"
    )
    supports_method_updates: bool = Field(
        default=True,
        description="Whether the entity is updated via mutator methods"
    )

    @model_validator(mode='after')
    def _check_key_properties(self) -> 'EntityDescriptor':
        if self.properties:
            known = {p.name for p in self.properties}
            missing = [k for k in self.key_properties if k not in known]
            if missing:
                raise ValueError(
                    f"Key properties {missing} are not properties "
                    f"of entity {self.entity_type}"
                )
        return self

    def get_methods_named(self, method_name: str) -> list[MethodCandidate]:
        """Get mutator methods with exactly this name, in declaration order."""
        return [m for m in self.mutator_methods if m.name == method_name]


class DtoDescriptor(BaseModel):
    """
    A DTO type linked to an entity.

    Attributes:
        dto_type: DTO type name (used for the naming convention)
        linked_entity: Name of the entity type this DTO maps to
        properties: Public DTO properties in declaration order
    """
    model_config = DESCRIPTOR_CONFIG

    dto_type: str = Field(
        min_length=1,
        description="DTO type name"
    )
    linked_entity: str = Field(
        min_length=1,
        description="Entity type name the DTO is linked to"
    )
    properties: tuple[PropertyDescriptor, ...] = Field(
        default=(),
        description="DTO properties in declaration order"
    )

    @field_validator('properties')
    @classmethod
    def _unique_property_names(
        cls,
        value: tuple[PropertyDescriptor, ...]
    ) -> tuple[PropertyDescriptor, ...]:
        seen = set()
        for prop in value:
            if prop.name in seen:
                raise ValueError(f"Duplicate DTO property: {prop.name}")
            seen.add(prop.name)
        return value

    @property
    def writable_properties(self) -> list[PropertyDescriptor]:
        """Properties that can be written back, in declaration order."""
        return [p for p in self.properties if p.is_writable]


# =============================================================================
# CONFIGURATION
# =============================================================================

class PerDtoConfig(BaseModel):
    """
    Optional per-DTO configuration.

    update_methods accepts either a comma-separated string
    ("UpdateName, UpdateStatus") or a list. It is parsed once into an
    ordered tuple of distinct method names. An empty value means no
    explicit configuration.
    """
    model_config = DESCRIPTOR_CONFIG

    update_methods: Optional[tuple[str, ...]] = Field(
        default=None,
        description="Explicit mutator method names to bind, in order"
    )

    @field_validator('update_methods', mode='before')
    @classmethod
    def _parse_update_methods(
        cls,
        value: Union[str, list[str], tuple[str, ...], None]
    ) -> Optional[tuple[str, ...]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(UPDATE_METHODS_SEPARATOR)

        tokens = []
        for token in value:
            token = str(token).strip()
            if token and token not in tokens:
                tokens.append(token)

        return tuple(tokens) if tokens else None

    @property
    def has_update_methods(self) -> bool:
        return self.update_methods is not None


__all__ = [
    'PropertyDescriptor',
    'ParameterDescriptor',
    'MethodCandidate',
    'EntityDescriptor',
    'DtoDescriptor',
    'PerDtoConfig',
]
