# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for dto_link

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

# Make tests/fixtures importable as `fixtures`
TESTS_ROOT = Path(__file__).parent
sys.path.insert(0, str(TESTS_ROOT))

from fixtures.sample_descriptors import (  # noqa: E402
    SAMPLE_YAML,
    customer_entity,
    customer_vm,
    order_dto,
    order_entity,
    values_dto,
    values_entity,
)
from dto_link.process.matcher.engine import DtoDecoder  # noqa: E402


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'DTO_LINK_ENVIRONMENT': 'test',
        'DTO_LINK_LOG_LEVEL': 'DEBUG',
        'DTO_LINK_LOG_CONSOLE': 'false',
        'DTO_LINK_NAME_MATCHER': 'strict',
        'DTO_LINK_DESCRIPTOR_DIR': '/tmp/dto_link_test/descriptors',
        'DTO_LINK_FAIL_ON_ERRORS': 'true',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from dto_link.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# DESCRIPTOR FIXTURES
# ==============================================================================

@pytest.fixture
def decoder():
    """Decoder with the default name matcher."""
    return DtoDecoder()


@pytest.fixture
def order_entity_descriptor():
    return order_entity()


@pytest.fixture
def order_dto_descriptor():
    return order_dto()


@pytest.fixture
def values_entity_descriptor():
    return values_entity()


@pytest.fixture
def values_dto_descriptor():
    return values_dto()


@pytest.fixture
def customer_entity_descriptor():
    return customer_entity()


@pytest.fixture
def customer_vm_descriptor():
    return customer_vm()


@pytest.fixture
def descriptor_file(temp_dir):
    """Write the sample YAML to a file and return its path."""
    path = temp_dir / 'descriptors.yaml'
    path.write_text(SAMPLE_YAML, encoding='utf-8')
    return path


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)
