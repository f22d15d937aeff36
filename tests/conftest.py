from __future__ import annotations

import json as json_module
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from fake_backend import BASE_URL, BackendState, FlaskAdapter, create_backend
from rkroots_client import Config, create_client
from rkroots_client.src.services.api_client import ApiClient
from rkroots_client.src.services.credential_store import InMemoryCredentialStore
from rkroots_client.src.services.session_manager import SessionManager

ACCESS_KEY = "rkroots_auth"
REFRESH_KEY = "rkroots_refresh"
API_URL = "http://api.test/api/v1"


class BackendConfig(Config):
    DEBUG = False
    ENVIRONMENT = "development"
    API_URL = BASE_URL
    REQUEST_TIMEOUT = 5.0
    CREDENTIAL_BACKEND = "memory"
    ACCESS_TOKEN_KEY = ACCESS_KEY
    REFRESH_TOKEN_KEY = REFRESH_KEY


def make_response(status: int, body: Any = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = {200: "OK", 201: "Created", 204: "No Content", 401: "Unauthorized"}.get(status, "Error")
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json_module.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = str(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def store():
    return InMemoryCredentialStore({ACCESS_KEY: "A1", REFRESH_KEY: "R1"})


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def sessions(store, http):
    return SessionManager(store, base_url=API_URL, http=http, timeout=5, access_key=ACCESS_KEY, refresh_key=REFRESH_KEY)


@pytest.fixture
def api(sessions, http):
    return ApiClient(sessions, base_url=API_URL, http=http, timeout=5)


@pytest.fixture
def backend_state():
    return BackendState()


@pytest.fixture
def backend_http(backend_state):
    session = requests.Session()
    session.mount("http://rkroots.test", FlaskAdapter(create_backend(backend_state)))
    yield session
    session.close()


@pytest.fixture
def client(backend_http):
    with create_client(BackendConfig, store=InMemoryCredentialStore(), http=backend_http) as c:
        yield c


@pytest.fixture
def signed_in(client):
    client.auth.signup("ada@example.com", "s3cret", "Ada")
    return client
