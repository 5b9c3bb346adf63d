import pytest

from userbench import create_minimal_app, create_standard_app, generate_users
from userbench.testclient import TestClient


@pytest.fixture(scope="session")
def users():
    return generate_users()


@pytest.fixture(scope="session")
def standard_client():
    client = TestClient(create_standard_app())
    yield client
    client.close()


@pytest.fixture(scope="session")
def minimal_client():
    client = TestClient(create_minimal_app())
    yield client
    client.close()
