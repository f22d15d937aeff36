"""Valores de dominio compartidos por los recursos del API de RKRoots."""

from enum import Enum


class NodeStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class RelationshipType(str, Enum):
    PARENT_CHILD = "parent_child"
    SPOUSE = "spouse"
    SIBLING = "sibling"
    ADOPTED = "adopted"
    STEP = "step"


class AccessLevel(str, Enum):
    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"


class AccessRequestLevel(str, Enum):
    VIEWER = "viewer"
    EDITOR = "editor"


class EventType(str, Enum):
    BIRTH = "birth"
    MARRIAGE = "marriage"
    DEATH = "death"
    MILESTONE = "milestone"
    ACHIEVEMENT = "achievement"
    MEMORY = "memory"


class EntityType(str, Enum):
    NODE = "node"
    EVENT = "event"
    RELATIONSHIP = "relationship"


class NotificationType(str, Enum):
    ACCESS_GRANTED = "access_granted"
    SAME_PERSON_LINK_CREATED = "same_person_link_created"
    ACCESS_REQUEST = "access_request"
    COMMENT_ADDED = "comment_added"
    NODE_PUBLISHED = "node_published"
    TIMELINE_EVENT_ADDED = "timeline_event_added"


class AlbumSource(str, Enum):
    GOOGLE_DRIVE = "google_drive"
    GOOGLE_PHOTOS = "google_photos"
