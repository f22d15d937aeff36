"""Cliente HTTP autenticado para el backend de RKRoots.

Todas las llamadas al API pasan por ``ApiClient.request``: adjunta el token de
acceso, y ante un 401 renueva la sesion una sola vez (compartida entre hilos)
y reintenta la peticion original.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import requests

from ..config import Config
from ..errors import AuthorizationFailed, CredentialStoreError, TransportFailure, UpstreamError
from ..utils import elapsed_ms, error_message, response_payload
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

UNAUTHORIZED = 401


@dataclass(frozen=True)
class RequestAttempt:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    retried: bool = False

    def replay(self) -> "RequestAttempt":
        return replace(self, retried=True)


class ApiClient:
    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        sessions: SessionManager,
        base_url: Optional[str] = None,
        http: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.sessions = sessions
        self.base_url = (base_url or Config.API_URL).rstrip("/")
        self.http = http or sessions.http
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self._renewal_lock = threading.Lock()
        self._pending_renewal: Optional[Future] = None

    def get(self, path: str, **kwargs) -> requests.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> requests.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> requests.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> requests.Response:
        return self.request("DELETE", path, **kwargs)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        renew_on_unauthorized: bool = True,
    ) -> requests.Response:
        """Send one logical request.

        A 401 is recovered at most once: the session is renewed (or an
        in-flight renewal is awaited) and the request is replayed with the new
        token. ``renew_on_unauthorized=False`` starts the attempt with its
        retry already spent, so a 401 fails straight away.
        """
        attempt = RequestAttempt(method.upper(), path, params=params, json=json, retried=not renew_on_unauthorized)
        resp = self._send(attempt)
        if resp.status_code != UNAUTHORIZED:
            return self._check(resp)
        if attempt.retried:
            raise self._unauthorized(resp)

        token = self._await_renewal()
        resp = self._send(attempt.replay(), token=token)
        if resp.status_code == UNAUTHORIZED:
            raise self._unauthorized(resp)
        return self._check(resp)

    def renew_session(self) -> str:
        """Renew now, sharing any renewal already in flight."""
        return self._await_renewal()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, token: Optional[str]) -> Dict[str, str]:
        headers = dict(self.DEFAULT_HEADERS)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, attempt: RequestAttempt, token: Optional[str] = None) -> requests.Response:
        if token is None:
            token = self.sessions.get_access_credential()
        started = time.time()
        try:
            resp = self.http.request(
                attempt.method,
                self._url(attempt.path),
                params=attempt.params,
                json=attempt.json,
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.debug("%s %s failed: %s", attempt.method, attempt.path, exc)
            raise TransportFailure(f"{attempt.method} {attempt.path} failed: {exc}") from exc
        logger.debug(
            "%s %s -> %s (%d ms)%s",
            attempt.method,
            attempt.path,
            resp.status_code,
            elapsed_ms(started, time.time()),
            " [retry]" if attempt.retried else "",
        )
        return resp

    def _await_renewal(self) -> str:
        """Join the in-flight renewal, or start one if none is running.

        The thread that creates the shared future runs the renewal and settles
        it; everyone else blocks on the same future.
        """
        with self._renewal_lock:
            pending = self._pending_renewal
            owner = pending is None
            if owner:
                pending = Future()
                self._pending_renewal = pending

        if owner:
            try:
                token = self.sessions.renew()
            except Exception as exc:
                self._clear_after_failed_renewal()
                pending.set_exception(exc)
            else:
                pending.set_result(token)
            finally:
                if not pending.done():
                    pending.cancel()
                with self._renewal_lock:
                    self._pending_renewal = None
        return pending.result()

    def _clear_after_failed_renewal(self) -> None:
        try:
            self.sessions.clear_credentials()
        except CredentialStoreError as exc:
            logger.error("Could not clear credentials after failed renewal: %s", exc)
        logger.warning("Session renewal failed; stored credentials cleared")

    def _check(self, resp: requests.Response) -> requests.Response:
        if 200 <= resp.status_code < 300:
            return resp
        payload = response_payload(resp)
        raise UpstreamError(error_message(resp, payload), status_code=resp.status_code, payload=payload)

    def _unauthorized(self, resp: requests.Response) -> AuthorizationFailed:
        payload = response_payload(resp)
        return AuthorizationFailed(error_message(resp, payload), status_code=resp.status_code, payload=payload)
