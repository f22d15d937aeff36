from typing import Any, Dict, List

from ..models import AlbumSource
from .base import ResourceClient


class AlbumsResource(ResourceClient):
    """Albumes de fotos externos (Google Drive / Google Photos) enlazados a un arbol."""

    name = "albums"

    def get_albums(self, tree_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/trees/{tree_id}/albums")

    def link_album(self, tree_id: str, album_source: AlbumSource, album_identifier: str, album_name: str) -> Dict[str, Any]:
        return self._post(
            f"/trees/{tree_id}/albums",
            {"albumSource": album_source, "albumIdentifier": album_identifier, "albumName": album_name},
        )

    def delete_album(self, album_id: str) -> None:
        self._delete(f"/albums/{album_id}")
