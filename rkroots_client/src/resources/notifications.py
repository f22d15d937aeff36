from typing import Any, Dict, List

from .base import ResourceClient


class NotificationsResource(ResourceClient):
    name = "notifications"

    def get_notifications(self, unread_only: bool = False) -> List[Dict[str, Any]]:
        return self._get("/notifications", {"unreadOnly": "true" if unread_only else "false"})

    def get_unread_count(self) -> int:
        return len(self.get_notifications(unread_only=True) or [])

    def mark_as_read(self, notification_id: str) -> None:
        self.api.put(f"/notifications/{notification_id}/read")

    def mark_all_as_read(self) -> None:
        self.api.put("/notifications/read-all")
