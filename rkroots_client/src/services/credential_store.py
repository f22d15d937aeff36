"""Credential store backends: OS keychain through ``keyring`` or process memory."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from ..config import Config
from ..errors import CredentialStoreError
from .base import CredentialStore

logger = logging.getLogger(__name__)


class InMemoryCredentialStore(CredentialStore):
    name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def clear(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)


class KeyringCredentialStore(CredentialStore):
    """Keeps each credential under its own keyring service name.

    The key doubles as the service name so the access and refresh secrets are
    separate keychain entries; ``username`` is the account both share.
    """

    name = "keyring"

    def __init__(self, username: Optional[str] = None):
        self.username = username or Config.KEYRING_USERNAME

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(key, self.username)
        except KeyringError as exc:
            raise CredentialStoreError(f"Failed to read {key} from keychain: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            keyring.set_password(key, self.username, value)
        except KeyringError as exc:
            raise CredentialStoreError(f"Failed to store {key} in keychain: {exc}") from exc
        logger.debug("Stored %s in keychain", key)

    def clear(self, key: str) -> None:
        try:
            keyring.delete_password(key, self.username)
        except PasswordDeleteError:
            # nothing stored
            return
        except KeyringError as exc:
            raise CredentialStoreError(f"Failed to delete {key} from keychain: {exc}") from exc
        logger.debug("Deleted %s from keychain", key)


def build_credential_store(backend: Optional[str] = None, username: Optional[str] = None) -> CredentialStore:
    name = (backend or Config.CREDENTIAL_BACKEND or "keyring").lower()
    if name == "keyring":
        return KeyringCredentialStore(username)
    if name == "memory":
        return InMemoryCredentialStore()
    raise ValueError(f"Unsupported credential backend: {name}")
