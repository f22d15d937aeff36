from typing import Any, Dict, List, Optional

from .base import ResourceClient


class SearchResource(ResourceClient):
    name = "search"

    def search(self, query: str) -> List[Dict[str, Any]]:
        return self._get("/search", {"q": query})

    def search_nodes(
        self,
        query: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        pet_name: Optional[str] = None,
        place_of_birth: Optional[str] = None,
        tree_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "q": query,
            "firstName": first_name or None,
            "lastName": last_name or None,
            "petName": pet_name or None,
            "placeOfBirth": place_of_birth or None,
            "treeId": tree_id or None,
        }
        return self._get("/search", params)

    def search_in_tree(self, tree_id: str, query: str) -> List[Dict[str, Any]]:
        return self._get("/search", {"q": query, "treeId": tree_id})
