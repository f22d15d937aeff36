"""Enlaces "misma persona" entre arboles y solicitudes de acceso derivadas."""

from typing import Any, Dict, List, Optional

from ..models import AccessRequestLevel
from .base import ResourceClient


class SamePersonLinksResource(ResourceClient):
    name = "same_person_links"

    def create_link(self, node_id1: str, node_id2: str) -> Dict[str, Any]:
        return self._post("/same-person-links", {"nodeId1": node_id1, "nodeId2": node_id2})

    def get_linked_nodes(self, node_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/nodes/{node_id}/linked-nodes")

    def get_linked_trees(self, node_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/nodes/{node_id}/linked-trees")

    def get_linked_tree_info(self, node_id: str) -> Dict[str, Any]:
        """Returns ``{hasLinkedTree, linkedTrees}`` with the caller's access to each tree."""
        return self._get(f"/nodes/{node_id}/linked-tree-info")

    def get_link(self, link_id: str) -> Dict[str, Any]:
        return self._get(f"/same-person-links/{link_id}")

    def delete_link(self, link_id: str) -> None:
        self._delete(f"/same-person-links/{link_id}")

    def submit_access_request(self, tree_id: str, requested_level: AccessRequestLevel) -> Dict[str, Any]:
        return self._post("/access-requests", {"treeId": tree_id, "requestedLevel": requested_level})

    def get_access_requests(self, tree_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/trees/{tree_id}/access-requests")

    def get_access_request(self, request_id: str) -> Dict[str, Any]:
        return self._get(f"/access-requests/{request_id}")

    def approve_access_request(self, request_id: str, granted_level: Optional[AccessRequestLevel] = None) -> None:
        self._put(f"/access-requests/{request_id}/approve", {"grantedLevel": granted_level})

    def deny_access_request(self, request_id: str) -> None:
        self.api.put(f"/access-requests/{request_id}/deny")
