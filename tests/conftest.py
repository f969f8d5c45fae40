"""
Fixtures shared by all tests.
"""

import pytest
from fastapi.testclient import TestClient

from uadetect.detector import KNOWN_INPUTS
from uadetect.main import app


@pytest.fixture(autouse=True)
def clear_classification_cache():
    """Each test starts with an empty module-level cache."""
    KNOWN_INPUTS.clear()
    yield
    KNOWN_INPUTS.clear()


@pytest.fixture
def client():
    """FastAPI test client with lifespan events."""
    with TestClient(app) as test_client:
        yield test_client
