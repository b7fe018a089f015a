import pytest
from fastapi.testclient import TestClient

from fingerprint_dashboard.config import Config
from fingerprint_dashboard.main import create_app


@pytest.fixture
def settings():
    s = Config()
    s.LOG_CAPACITY = 500
    s.LOG_DEFAULT_LIMIT = 50
    s.LOG_MAX_LIMIT = 100
    s.DEVICE_OFFLINE_AFTER = 60
    s.ARCHIVE_DB_URL = ""
    return s


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
