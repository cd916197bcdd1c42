import logging

import pytest
from fastapi.testclient import TestClient

from access_stub.main import create_app


@pytest.fixture
def request_logger():
    return logging.getLogger("tests.webserver")


@pytest.fixture
def app(request_logger):
    return create_app(request_logger)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
