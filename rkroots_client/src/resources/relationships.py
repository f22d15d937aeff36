from typing import Any, Dict, List, Optional

from ..models import RelationshipType
from .base import ResourceClient


class RelationshipsResource(ResourceClient):
    name = "relationships"

    def get_relationships(self, tree_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/trees/{tree_id}/relationships")

    def create_relationship(
        self,
        tree_id: str,
        node_id1: str,
        node_id2: str,
        relationship_type: RelationshipType,
        publish_draft_nodes: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Returns ``{relationship, publishedNodeIds, draftNodeIds}``."""
        return self._post(
            f"/trees/{tree_id}/relationships",
            {
                "nodeId1": node_id1,
                "nodeId2": node_id2,
                "relationshipType": relationship_type,
                "publishDraftNodes": publish_draft_nodes,
            },
        )

    def delete_relationship(self, tree_id: str, relationship_id: str) -> None:
        self._delete(f"/trees/{tree_id}/relationships/{relationship_id}")
