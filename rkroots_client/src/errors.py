"""Exception hierarchy raised by the RKRoots client.

Everything the request pipeline surfaces derives from ``ApiError`` so callers
can catch one base class; ``CredentialStoreError`` is kept apart because it
describes a local storage problem, not an API outcome.
"""

from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class TransportFailure(ApiError):
    """Network level failure: timeout, DNS, refused or reset connection."""


class UpstreamError(ApiError):
    """Non-2xx response other than 401, passed through with its body."""


class AuthorizationFailed(ApiError):
    """401 that could not be recovered by a session renewal."""


class SessionExpired(ApiError):
    """The session cannot be renewed; stored credentials have been cleared."""


class NoRenewalCredential(SessionExpired):
    pass


class RenewalRejected(SessionExpired):
    pass


class MalformedResponse(ApiError):
    pass


class CredentialStoreError(Exception):
    pass
