from typing import Any, Dict, List

from .base import ResourceClient


class NodesResource(ResourceClient):
    """Personas (nodos) de un arbol. Los campos viajan en camelCase tal cual."""

    name = "nodes"

    def get_nodes(self, tree_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/trees/{tree_id}/nodes")

    def get_node(self, tree_id: str, node_id: str) -> Dict[str, Any]:
        return self._get(f"/trees/{tree_id}/nodes/{node_id}")

    def create_node(self, tree_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._post(f"/trees/{tree_id}/nodes", data)

    def update_node(self, tree_id: str, node_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._put(f"/trees/{tree_id}/nodes/{node_id}", data)

    def delete_node(self, tree_id: str, node_id: str) -> None:
        self._delete(f"/trees/{tree_id}/nodes/{node_id}")

    def publish_node(self, tree_id: str, node_id: str) -> Dict[str, Any]:
        return self._post(f"/trees/{tree_id}/nodes/{node_id}/publish")
