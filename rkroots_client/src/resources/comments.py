from typing import Any, Dict, List

from ..models import EntityType
from .base import ResourceClient


class CommentsResource(ResourceClient):
    name = "comments"

    def get_comments(self, tree_id: str, entity_type: EntityType, entity_id: str) -> List[Dict[str, Any]]:
        return self._get("/comments", {"treeId": tree_id, "entityType": entity_type, "entityId": entity_id})

    def create_comment(self, tree_id: str, entity_type: EntityType, entity_id: str, comment_text: str) -> Dict[str, Any]:
        return self._post(
            "/comments",
            {"treeId": tree_id, "entityType": entity_type, "entityId": entity_id, "commentText": comment_text},
        )

    def update_comment(self, comment_id: str, comment_text: str) -> Dict[str, Any]:
        return self._put(f"/comments/{comment_id}", {"commentText": comment_text})

    def delete_comment(self, comment_id: str) -> None:
        self._delete(f"/comments/{comment_id}")
