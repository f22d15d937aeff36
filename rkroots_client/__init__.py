import logging
from typing import Optional

import requests

from .src.config import Config
from .src.errors import (
    ApiError,
    AuthorizationFailed,
    CredentialStoreError,
    MalformedResponse,
    NoRenewalCredential,
    RenewalRejected,
    SessionExpired,
    TransportFailure,
    UpstreamError,
)
from .src.services.api_client import ApiClient
from .src.services.base import CredentialStore
from .src.services.credential_store import build_credential_store
from .src.services.session_manager import SessionManager
from .src.resources.albums import AlbumsResource
from .src.resources.auth import AuthResource
from .src.resources.comments import CommentsResource
from .src.resources.nodes import NodesResource
from .src.resources.notifications import NotificationsResource
from .src.resources.relationships import RelationshipsResource
from .src.resources.same_person_links import SamePersonLinksResource
from .src.resources.search import SearchResource
from .src.resources.timeline import TimelineResource
from .src.resources.trees import TreesResource


class RkRootsClient:
    def __init__(self, api: ApiClient, sessions: SessionManager):
        self.api = api
        self.sessions = sessions
        self.auth = AuthResource(api, sessions)
        self.trees = TreesResource(api)
        self.nodes = NodesResource(api)
        self.relationships = RelationshipsResource(api)
        self.timeline = TimelineResource(api)
        self.comments = CommentsResource(api)
        self.notifications = NotificationsResource(api)
        self.albums = AlbumsResource(api)
        self.search = SearchResource(api)
        self.same_person_links = SamePersonLinksResource(api)

    def close(self) -> None:
        self.api.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def create_client(
    config=Config,
    store: Optional[CredentialStore] = None,
    http: Optional[requests.Session] = None,
) -> RkRootsClient:
    logging.basicConfig(level=logging.DEBUG if getattr(config, "DEBUG", True) else logging.INFO)

    http = http or requests.Session()
    store = store or build_credential_store(config.CREDENTIAL_BACKEND, getattr(config, "KEYRING_USERNAME", None))
    sessions = SessionManager(
        store,
        base_url=config.API_URL,
        http=http,
        timeout=config.REQUEST_TIMEOUT,
        access_key=config.ACCESS_TOKEN_KEY,
        refresh_key=config.REFRESH_TOKEN_KEY,
    )
    api = ApiClient(sessions, base_url=config.API_URL, http=http, timeout=config.REQUEST_TIMEOUT)
    logging.getLogger(__name__).debug(
        "RKRoots client ready: %s (%s, store=%s)", api.base_url, getattr(config, "ENVIRONMENT", "?"), store.name
    )
    return RkRootsClient(api, sessions)


__all__ = [
    "ApiClient",
    "ApiError",
    "AuthorizationFailed",
    "Config",
    "CredentialStore",
    "CredentialStoreError",
    "MalformedResponse",
    "NoRenewalCredential",
    "RenewalRejected",
    "RkRootsClient",
    "SessionExpired",
    "SessionManager",
    "TransportFailure",
    "UpstreamError",
    "create_client",
]
