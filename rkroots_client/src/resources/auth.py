"""Autenticacion contra el backend de RKRoots (email/password, Google, Apple).

Los endpoints que emiten credenciales no disparan renovacion ante un 401: un
password incorrecto no debe borrar ni renovar la sesion actual.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..errors import MalformedResponse
from ..services.api_client import ApiClient
from ..services.session_manager import Credentials, SessionManager
from ..utils import response_payload
from .base import ResourceClient

logger = logging.getLogger(__name__)


class AuthResource(ResourceClient):
    name = "auth"

    def __init__(self, api: ApiClient, sessions: SessionManager):
        super().__init__(api)
        self.sessions = sessions

    def _authenticate(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        resp = self.api.post(path, json=data, renew_on_unauthorized=False)
        payload = response_payload(resp)
        if not isinstance(payload, dict) or not payload.get("accessToken") or not payload.get("refreshToken"):
            raise MalformedResponse(f"{path} did not return a token pair", status_code=resp.status_code)
        self.sessions.store_credentials(payload["accessToken"], payload["refreshToken"])
        logger.info("Signed in via %s", path)
        return payload

    def signup(self, email: str, password: str, display_name: str) -> Dict[str, Any]:
        return self._authenticate("/auth/signup", {"email": email, "password": password, "displayName": display_name})

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._authenticate("/auth/login", {"email": email, "password": password})

    def google_sign_in(self, id_token: str) -> Dict[str, Any]:
        """Intercambia un ID token de Google (obtenido por el SDK nativo) por una sesion."""
        if not id_token:
            raise ValueError("Google ID token requerido")
        return self._authenticate("/auth/google/mobile", {"idToken": id_token})

    def apple_sign_in(
        self,
        identity_token: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"identityToken": identity_token}
        # Apple only shares the user's name and email on the first sign-in
        user: Dict[str, Any] = {}
        if email:
            user["email"] = email
        name = {k: v for k, v in (("firstName", first_name), ("lastName", last_name)) if v}
        if name:
            user["name"] = name
        if user:
            data["user"] = user
        return self._authenticate("/auth/apple", data)

    def refresh(self) -> str:
        return self.api.renew_session()

    def logout(self) -> None:
        self.sessions.clear_credentials()
        logger.info("Signed out")

    def get_profile(self) -> Dict[str, Any]:
        return self._get("/auth/profile")

    def get_stored_tokens(self) -> Optional[Credentials]:
        return self.sessions.stored_credentials()

    def is_authenticated(self) -> bool:
        return self.sessions.stored_credentials() is not None
