from typing import Any, Dict, List

from .base import ResourceClient


class TimelineResource(ResourceClient):
    name = "timeline"

    def get_events(self, tree_id: str) -> List[Dict[str, Any]]:
        return self._get(f"/trees/{tree_id}/events")

    def create_event(self, tree_id: str, data: Dict[str, Any], participant_ids: List[str]) -> Dict[str, Any]:
        return self._post(f"/trees/{tree_id}/events", {**data, "participantIds": list(participant_ids)})

    # edits and deletes address the event directly, not through its tree
    def update_event(self, event_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._put(f"/events/{event_id}", data)

    def delete_event(self, event_id: str) -> None:
        self._delete(f"/events/{event_id}")
