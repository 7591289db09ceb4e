"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest
from typing import Any, Dict, List


@pytest.fixture
def currency_test_cases() -> List[Dict[str, Any]]:
    """Dollar strings with their cent values and canonical forms."""
    return [
        {'input': '5', 'cents': 500, 'canonical': '$5.00'},
        {'input': '5.5', 'cents': 550, 'canonical': '$5.50'},
        {'input': '5.50', 'cents': 550, 'canonical': '$5.50'},
        {'input': '$5.50', 'cents': 550, 'canonical': '$5.50'},
        {'input': '-5.50', 'cents': -550, 'canonical': '-$5.50'},
        {'input': '-$5.50', 'cents': -550, 'canonical': '-$5.50'},
        {'input': '+5.50', 'cents': 550, 'canonical': '$5.50'},
        {'input': '$0.05', 'cents': 5, 'canonical': '$0.05'},
        {'input': '-0.5', 'cents': -50, 'canonical': '-$0.50'},
        {'input': '007.10', 'cents': 710, 'canonical': '$7.10'},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv('DOLLARS_ENV', 'test')
    monkeypatch.delenv('DEBUG', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr('dollars.core.config._config', None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
