from typing import Any, Dict, Optional

from ..services.api_client import ApiClient
from ..utils import compact, response_payload


class ResourceClient:
    name = "base"

    def __init__(self, api: ApiClient):
        self.api = api

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return response_payload(self.api.get(path, params=compact(params) if params else None))

    def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return response_payload(self.api.post(path, json=compact(data) if data is not None else None))

    def _put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return response_payload(self.api.put(path, json=compact(data) if data is not None else None))

    def _delete(self, path: str) -> None:
        self.api.delete(path)
