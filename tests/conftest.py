"""Pytest configuration and shared fixtures."""

import pytest
from solders.pubkey import Pubkey


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")


@pytest.fixture
def user():
    return Pubkey.new_unique()


@pytest.fixture
def input_mint():
    return Pubkey.new_unique()
