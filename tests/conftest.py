import os

import pytest
from fastapi.testclient import TestClient

# Module-level settings are built at import time
os.environ.setdefault("ADMIN_PASSWORD", "admin123")

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def settings():
    from hr_intranet.config import Settings

    return Settings(
        secret_key="test-secret",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(settings):
    from hr_intranet.main import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    resp = client.post(
        "/login",
        data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert resp.status_code == 302
    return client
