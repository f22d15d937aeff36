from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class CredentialStore(ABC):
    """Clase base para almacenes seguros de credenciales.

    Cada secreto se direcciona por una clave propia, de modo que el token de
    acceso y el de renovacion pueden borrarse por separado.
    """

    name: str = "store"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None when nothing is stored under ``key``."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove ``key``. Clearing a key that holds nothing is not an error."""
        raise NotImplementedError
