"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import app
from app.calculations.terms import ProjectTerms


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def sample_terms():
    """$1M project, $100 tokens, 80% tokenized, 8% APR."""
    return ProjectTerms(
        total_price=1_000_000,
        token_price=100,
        tokens_available_percent=80,
        min_investment=500,
        apr=8,
        irr=12,
        value_growth=5,
    )


@pytest.fixture
def sample_terms_payload():
    """JSON form of sample_terms for API requests."""
    return {
        "total_price": 1_000_000,
        "token_price": 100,
        "tokens_available_percent": 80,
        "min_investment": 500,
        "apr": 8,
        "irr": 12,
        "value_growth": 5,
    }
