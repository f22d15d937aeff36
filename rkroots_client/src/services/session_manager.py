"""Ciclo de vida de la sesion: token de acceso + token de renovacion.

Uso:
    sessions = SessionManager(store)
    token = sessions.get_access_credential()   # None si no hay sesion
    token = sessions.renew()                   # rota el par via /auth/refresh
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional

import requests

from ..config import Config
from ..errors import (
    CredentialStoreError,
    NoRenewalCredential,
    RenewalRejected,
    TransportFailure,
    UpstreamError,
)
from ..utils import error_message, response_payload
from .base import CredentialStore

logger = logging.getLogger(__name__)


class Credentials(NamedTuple):
    access_token: str
    refresh_token: str


class SessionManager:
    REFRESH_PATH = "/auth/refresh"

    def __init__(
        self,
        store: CredentialStore,
        base_url: Optional[str] = None,
        http: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        access_key: Optional[str] = None,
        refresh_key: Optional[str] = None,
    ):
        self.store = store
        self.base_url = (base_url or Config.API_URL).rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self.access_key = access_key or Config.ACCESS_TOKEN_KEY
        self.refresh_key = refresh_key or Config.REFRESH_TOKEN_KEY
        if self.access_key == self.refresh_key:
            raise ValueError("Access and refresh credentials need distinct store keys")

    def get_access_credential(self) -> Optional[str]:
        try:
            return self.store.get(self.access_key) or None
        except CredentialStoreError as exc:
            logger.warning("Could not read access credential: %s", exc)
            return None

    def has_renewal_credential(self) -> bool:
        try:
            return bool(self.store.get(self.refresh_key))
        except CredentialStoreError:
            return False

    def stored_credentials(self) -> Optional[Credentials]:
        try:
            access = self.store.get(self.access_key)
            refresh = self.store.get(self.refresh_key)
        except CredentialStoreError as exc:
            logger.warning("Could not read stored credentials: %s", exc)
            return None
        if access and refresh:
            return Credentials(access, refresh)
        return None

    def store_credentials(self, access_token: str, refresh_token: str) -> None:
        try:
            self.store.set(self.access_key, access_token)
            self.store.set(self.refresh_key, refresh_token)
        except CredentialStoreError:
            # never keep half a pair
            self._clear_quietly()
            raise

    def clear_credentials(self) -> None:
        self.store.clear(self.access_key)
        self.store.clear(self.refresh_key)

    def _clear_quietly(self) -> None:
        for key in (self.access_key, self.refresh_key):
            try:
                self.store.clear(key)
            except CredentialStoreError as exc:
                logger.error("Could not clear %s after a failed write: %s", key, exc)

    def renew(self) -> str:
        """Exchange the stored refresh token for a new pair and return the access token.

        The refresh token is single use: the server rotates it, and the new one
        overwrites the old value in the store. Nothing is written on failure.
        """
        try:
            refresh_token = self.store.get(self.refresh_key)
        except CredentialStoreError as exc:
            raise NoRenewalCredential(f"Refresh token unreadable: {exc}") from exc
        if not refresh_token:
            raise NoRenewalCredential("No refresh token available")

        logger.info("Renewing session")
        access_token, new_refresh_token = self._exchange(refresh_token)
        self.store_credentials(access_token, new_refresh_token)
        logger.info("Session renewed")
        return access_token

    def _exchange(self, refresh_token: str) -> Credentials:
        try:
            resp = self.http.post(
                f"{self.base_url}{self.REFRESH_PATH}",
                json={"refreshToken": refresh_token},
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Session renewal failed: %s", exc.__class__.__name__)
            raise TransportFailure(f"Refresh request failed: {exc}") from exc

        payload: Any = response_payload(resp)
        if resp.status_code >= 500:
            logger.warning("Session renewal failed with %s", resp.status_code)
            raise UpstreamError(error_message(resp, payload), status_code=resp.status_code, payload=payload)
        if resp.status_code >= 400:
            logger.warning("Session renewal rejected with %s", resp.status_code)
            raise RenewalRejected(error_message(resp, payload), status_code=resp.status_code, payload=payload)

        data = payload if isinstance(payload, dict) else {}
        access_token = data.get("accessToken")
        new_refresh_token = data.get("refreshToken")
        if not access_token or not new_refresh_token:
            raise RenewalRejected("Refresh response did not return a token pair", status_code=resp.status_code)
        return Credentials(access_token, new_refresh_token)
