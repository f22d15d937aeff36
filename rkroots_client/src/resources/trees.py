from typing import Any, Dict, List, Optional

from ..models import AccessLevel
from .base import ResourceClient


class TreesResource(ResourceClient):
    name = "trees"

    def get_trees(self) -> List[Dict[str, Any]]:
        return self._get("/trees")

    def get_tree(self, tree_id: str) -> Dict[str, Any]:
        return self._get(f"/trees/{tree_id}")

    def create_tree(self, tree_name: str, description: Optional[str] = None) -> Dict[str, Any]:
        return self._post("/trees", {"treeName": tree_name, "description": description})

    def update_tree(self, tree_id: str, tree_name: Optional[str] = None, description: Optional[str] = None) -> Dict[str, Any]:
        return self._put(f"/trees/{tree_id}", {"treeName": tree_name, "description": description})

    def delete_tree(self, tree_id: str) -> None:
        self._delete(f"/trees/{tree_id}")

    def get_access(self, tree_id: str) -> List[Dict[str, Any]]:
        """Usuarios con acceso al arbol (incluye email y displayName)."""
        return self._get(f"/trees/{tree_id}/access")

    def grant_access(self, tree_id: str, email: str, access_level: AccessLevel) -> Dict[str, Any]:
        return self._post(f"/trees/{tree_id}/access", {"email": email, "accessLevel": access_level})

    def revoke_access(self, tree_id: str, user_id: str) -> None:
        self._delete(f"/trees/{tree_id}/access/{user_id}")
