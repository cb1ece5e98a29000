# Path: tests/unit/test_descriptor_loader.py
"""
Unit Tests for DescriptorLoader

Tests:
- Loading single files and directories
- update_methods split into per-DTO configuration
- Invalid files raise DescriptorLoadError
"""

import pytest

from dto_link.process.matcher.engine import DescriptorLoader
from dto_link.process.matcher.models import DescriptorLoadError


class TestLoadFile:
    """Test loading one YAML file."""

    def test_entities_and_dtos_loaded(self, descriptor_file):
        descriptors = DescriptorLoader().load_file(descriptor_file)

        assert set(descriptors.entities) == {'Order', 'Customer'}
        assert list(descriptors.dtos) == ['OrderDto', 'OrderStatusDto', 'CustomerVM']

    def test_update_methods_become_config(self, descriptor_file):
        descriptors = DescriptorLoader().load_file(descriptor_file)

        assert descriptors.get_config('OrderStatusDto').update_methods == ('UpdateStatus',)
        assert descriptors.get_config('OrderDto') is None

    def test_entity_fields(self, descriptor_file):
        descriptors = DescriptorLoader().load_file(descriptor_file)

        order = descriptors.get_entity('Order')
        assert order.key_properties == ('OrderId',)
        assert [m.render() for m in order.mutator_methods] == [
            'Order(decimal amount, string status)',
            'UpdateStatus(string status)',
        ]
        assert not descriptors.get_entity('Customer').supports_method_updates

    def test_read_only_access(self, descriptor_file):
        dto = DescriptorLoader().load_file(descriptor_file).dtos['OrderDto']
        assert [p.name for p in dto.writable_properties] == ['Amount', 'Status']

    def test_empty_file(self, temp_dir):
        path = temp_dir / 'empty.yaml'
        path.write_text('', encoding='utf-8')

        assert len(DescriptorLoader().load_file(path)) == 0

    def test_missing_file(self, temp_dir):
        with pytest.raises(DescriptorLoadError, match="Cannot read"):
            DescriptorLoader().load_file(temp_dir / 'missing.yaml')

    def test_bad_yaml(self, temp_dir):
        path = temp_dir / 'bad.yaml'
        path.write_text('dtos: [unclosed', encoding='utf-8')

        with pytest.raises(DescriptorLoadError, match="YAML parse error"):
            DescriptorLoader().load_file(path)

    def test_invalid_shape(self, temp_dir):
        path = temp_dir / 'invalid.yaml'
        path.write_text('dtos:\n  - dto_type: OrderDto\n', encoding='utf-8')

        with pytest.raises(DescriptorLoadError, match="invalid DtoDescriptor"):
            DescriptorLoader().load_file(path)

    def test_top_level_list_rejected(self, temp_dir):
        path = temp_dir / 'list.yaml'
        path.write_text('- a\n- b\n', encoding='utf-8')

        with pytest.raises(DescriptorLoadError, match="expected a mapping"):
            DescriptorLoader().load_file(path)


class TestParse:
    """Test parsing in-memory data."""

    def test_update_methods_list(self):
        data = {
            'dtos': [{
                'dto_type': 'OrderDto',
                'linked_entity': 'Order',
                'update_methods': ['Order', 'UpdateStatus'],
            }]
        }
        descriptors = DescriptorLoader().parse(data)
        assert descriptors.get_config('OrderDto').update_methods == ('Order', 'UpdateStatus')

    def test_non_mapping_dto_entry(self):
        with pytest.raises(DescriptorLoadError, match="must be a mapping"):
            DescriptorLoader().parse({'dtos': ['OrderDto']})


class TestLoadAll:
    """Test loading a directory."""

    def test_loads_nested_files(self, temp_dir, descriptor_file):
        nested = temp_dir / 'more'
        nested.mkdir()
        (nested / 'invoice.yml').write_text(
            'entities:\n  - entity_type: Invoice\n', encoding='utf-8'
        )

        descriptors = DescriptorLoader(temp_dir).load_all()

        assert 'Invoice' in descriptors.entities
        assert 'OrderDto' in descriptors.dtos

    def test_later_file_wins(self, temp_dir, descriptor_file, capture_logs):
        (temp_dir / 'z_override.yaml').write_text(
            'dtos:\n  - dto_type: OrderDto\n    linked_entity: Customer\n',
            encoding='utf-8'
        )

        descriptors = DescriptorLoader(temp_dir).load_all()

        assert descriptors.dtos['OrderDto'].linked_entity == 'Customer'
        assert 'Duplicate DTO OrderDto' in capture_logs.getvalue()

    def test_missing_directory_gives_empty_set(self, temp_dir):
        assert len(DescriptorLoader(temp_dir / 'nope').load_all()) == 0

    def test_cache(self, temp_dir, descriptor_file):
        loader = DescriptorLoader(temp_dir)
        first = loader.load_all()

        assert loader.load_all() is first
        assert loader.load_all(use_cache=False) is not first

        loader.clear_cache()
        assert loader.load_all() is not first
