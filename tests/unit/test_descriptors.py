# Path: tests/unit/test_descriptors.py
"""
Unit Tests for Descriptor Models

Tests:
- Per-DTO configuration parsing
- Descriptor validation
- Rendering
- DescriptorSet merge rules
"""

import pytest
from pydantic import ValidationError

from fixtures.sample_descriptors import method, order_dto, order_entity, prop

from dto_link.constants import PropertyAccess
from dto_link.process.matcher.models import (
    DescriptorSet,
    DtoDescriptor,
    EntityDescriptor,
    PerDtoConfig,
    PropertyDescriptor,
)


class TestPerDtoConfig:
    """Test update_methods parsing."""

    def test_comma_separated_string(self):
        config = PerDtoConfig(update_methods='UpdateName, UpdateStatus')
        assert config.update_methods == ('UpdateName', 'UpdateStatus')

    def test_list_value(self):
        config = PerDtoConfig(update_methods=['UpdateName', ' UpdateStatus '])
        assert config.update_methods == ('UpdateName', 'UpdateStatus')

    def test_empty_tokens_dropped(self):
        config = PerDtoConfig(update_methods=' ,UpdateName,, ')
        assert config.update_methods == ('UpdateName',)

    def test_duplicates_removed_keeping_order(self):
        config = PerDtoConfig(update_methods='B,A,B')
        assert config.update_methods == ('B', 'A')

    @pytest.mark.parametrize('value', [None, '', ' , ', []])
    def test_empty_value_means_no_configuration(self, value):
        config = PerDtoConfig(update_methods=value)
        assert config.update_methods is None
        assert not config.has_update_methods

    def test_default(self):
        assert not PerDtoConfig().has_update_methods

    def test_is_frozen(self):
        config = PerDtoConfig(update_methods='A')
        with pytest.raises(ValidationError):
            config.update_methods = ('B',)


class TestPropertyDescriptor:
    """Test property descriptors."""

    def test_type_alias_accepted(self):
        p = PropertyDescriptor.model_validate({'name': 'Amount', 'type': 'decimal'})
        assert p.type_name == 'decimal'

    def test_writable_by_default(self):
        assert prop('Amount', 'decimal').is_writable

    def test_read_only(self):
        p = PropertyDescriptor.model_validate(
            {'name': 'OrderId', 'type': 'int', 'access': 'read_only'}
        )
        assert p.access == PropertyAccess.READ_ONLY
        assert not p.is_writable

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            PropertyDescriptor(name='', type_name='int')

    def test_render(self):
        assert prop('Amount', 'decimal').render() == 'decimal Amount'


class TestEntityDescriptor:
    """Test entity validation and lookups."""

    def test_unknown_key_property_rejected(self):
        with pytest.raises(ValidationError, match="Key properties"):
            order_entity(key_properties=['Missing'])

    def test_keys_without_properties_allowed(self):
        entity = EntityDescriptor(entity_type='Order', key_properties=['OrderId'])
        assert entity.key_properties == ('OrderId',)

    def test_get_methods_named_is_exact(self):
        entity = order_entity()
        assert [m.render() for m in entity.get_methods_named('UpdateStatus')] == [
            'UpdateStatus(string status)'
        ]
        assert entity.get_methods_named('updatestatus') == []

    def test_overloads_in_declaration_order(self):
        entity = order_entity(mutator_methods=[
            method('Set', ('int', 'a')),
            method('Other'),
            method('Set', ('int', 'a'), ('int', 'b')),
        ])
        assert [len(m.parameters) for m in entity.get_methods_named('Set')] == [1, 2]

    def test_supports_method_updates_default(self):
        assert order_entity().supports_method_updates


class TestDtoDescriptor:
    """Test DTO validation."""

    def test_duplicate_property_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate DTO property"):
            order_dto(properties=[prop('Amount', 'decimal'), prop('Amount', 'int')])

    def test_writable_properties(self):
        assert [p.name for p in order_dto().writable_properties] == ['Amount', 'Status']

    def test_linked_entity_required(self):
        with pytest.raises(ValidationError):
            DtoDescriptor(dto_type='OrderDto')


class TestDescriptorSet:
    """Test DescriptorSet rules."""

    def test_add_dto_with_config(self):
        descriptors = DescriptorSet()
        descriptors.add_dto(order_dto(), PerDtoConfig(update_methods='Order'))

        assert len(descriptors) == 1
        assert descriptors.get_config('OrderDto').update_methods == ('Order',)

    def test_last_dto_wins_and_drops_old_config(self):
        descriptors = DescriptorSet()
        descriptors.add_dto(order_dto(), PerDtoConfig(update_methods='Order'))
        replacement = order_dto(properties=[prop('Amount', 'decimal')])
        descriptors.add_dto(replacement)

        assert descriptors.dtos['OrderDto'] is replacement
        assert descriptors.get_config('OrderDto') is None

    def test_merge(self):
        first = DescriptorSet()
        first.add_entity(order_entity())
        second = DescriptorSet()
        second.add_dto(order_dto())

        merged = first.merge(second)

        assert merged is first
        assert merged.get_entity('Order') is not None
        assert 'OrderDto' in merged.dtos

    def test_unknown_entity_lookup(self):
        assert DescriptorSet().get_entity('Nope') is None
