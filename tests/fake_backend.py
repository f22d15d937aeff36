"""In-process stand-in for the RKRoots REST API.

Built from Flask blueprints and reached from ``requests`` through
``FlaskAdapter`` so the client runs its real pipeline against real HTTP
status codes. Refresh tokens rotate and are single use.
"""

import secrets
import threading
import uuid
from functools import wraps
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import requests
from flask import Blueprint, Flask, current_app, g, jsonify, request
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from rkroots_client.src.models import NotificationType

API_PREFIX = "/api/v1"
BASE_URL = f"http://rkroots.test{API_PREFIX}"


class BackendState:
    def __init__(self):
        self.lock = threading.Lock()
        self.users: Dict[str, Dict[str, Any]] = {}
        self.access_tokens: Dict[str, str] = {}  # token -> user_id
        self.refresh_tokens: Dict[str, str] = {}  # token -> user_id
        self.consumed_refresh: set = set()
        self.refresh_calls = 0
        self.trees: Dict[str, Dict[str, Any]] = {}
        self.nodes: Dict[str, Dict[str, Any]] = {}
        self.comments: Dict[str, Dict[str, Any]] = {}
        self.notifications: Dict[str, Dict[str, Any]] = {}
        self.requests_seen: list = []

    def issue(self, user_id: str) -> Dict[str, str]:
        access = f"acc-{secrets.token_urlsafe(8)}"
        refresh = f"ref-{secrets.token_urlsafe(8)}"
        self.access_tokens[access] = user_id
        self.refresh_tokens[refresh] = user_id
        return {"accessToken": access, "refreshToken": refresh}

    def expire_access_tokens(self) -> None:
        with self.lock:
            self.access_tokens.clear()

    def add_notification(self, user_id: str, message: str, is_read: bool = False) -> Dict[str, Any]:
        item = {
            "notificationId": str(uuid.uuid4()),
            "userId": user_id,
            "notificationType": NotificationType.COMMENT_ADDED.value,
            "message": message,
            "isRead": is_read,
            "createdAt": "2026-01-01T00:00:00Z",
        }
        self.notifications[item["notificationId"]] = item
        return item


def _state() -> BackendState:
    return current_app.config["STATE"]


def require_auth(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        token = header[len("Bearer "):] if header.startswith("Bearer ") else None
        with _state().lock:
            user_id = _state().access_tokens.get(token) if token else None
        if not user_id:
            return jsonify({"error": "Unauthorized"}), 401
        g.user_id = user_id
        return fn(*args, **kwargs)

    return wrapper


auth_bp = Blueprint("auth", __name__)
trees_bp = Blueprint("trees", __name__)
misc_bp = Blueprint("misc", __name__)


def _public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {k: user[k] for k in ("userId", "email", "displayName")}


@auth_bp.post("/signup")
def signup():
    body = request.get_json(force=True) or {}
    state = _state()
    with state.lock:
        if any(u["email"] == body.get("email") for u in state.users.values()):
            return jsonify({"error": "Email already registered"}), 409
        user = {
            "userId": str(uuid.uuid4()),
            "email": body.get("email"),
            "password": body.get("password"),
            "displayName": body.get("displayName"),
        }
        state.users[user["userId"]] = user
        tokens = state.issue(user["userId"])
    return jsonify({**tokens, "user": _public_user(user)}), 201


@auth_bp.post("/login")
def login():
    body = request.get_json(force=True) or {}
    state = _state()
    with state.lock:
        user = next(
            (u for u in state.users.values() if u["email"] == body.get("email") and u["password"] == body.get("password")),
            None,
        )
        if not user:
            return jsonify({"error": "Invalid credentials"}), 401
        tokens = state.issue(user["userId"])
    return jsonify({**tokens, "user": _public_user(user)}), 200


@auth_bp.post("/refresh")
def refresh():
    body = request.get_json(force=True) or {}
    token = body.get("refreshToken")
    state = _state()
    with state.lock:
        state.refresh_calls += 1
        user_id = state.refresh_tokens.pop(token, None)
        if not user_id:
            return jsonify({"error": "Invalid refresh token"}), 401
        state.consumed_refresh.add(token)
        tokens = state.issue(user_id)
    return jsonify(tokens), 200


@auth_bp.get("/profile")
@require_auth
def profile():
    return jsonify(_public_user(_state().users[g.user_id])), 200


@trees_bp.get("")
@require_auth
def list_trees():
    trees = [t for t in _state().trees.values() if t["ownerUserId"] == g.user_id]
    return jsonify(trees), 200


@trees_bp.post("")
@require_auth
def create_tree():
    body = request.get_json(force=True) or {}
    if not body.get("treeName"):
        return jsonify({"error": "treeName is required"}), 400
    tree = {
        "treeId": str(uuid.uuid4()),
        "treeName": body["treeName"],
        "ownerUserId": g.user_id,
    }
    if body.get("description"):
        tree["description"] = body["description"]
    _state().trees[tree["treeId"]] = tree
    return jsonify(tree), 201


def _owned_tree(tree_id: str) -> Optional[Dict[str, Any]]:
    tree = _state().trees.get(tree_id)
    if not tree or tree["ownerUserId"] != g.user_id:
        return None
    return tree


@trees_bp.get("/<tree_id>")
@require_auth
def get_tree(tree_id):
    tree = _owned_tree(tree_id)
    if not tree:
        return jsonify({"error": "Tree not found"}), 404
    return jsonify(tree), 200


@trees_bp.put("/<tree_id>")
@require_auth
def update_tree(tree_id):
    tree = _owned_tree(tree_id)
    if not tree:
        return jsonify({"error": "Tree not found"}), 404
    body = request.get_json(force=True) or {}
    tree.update({k: v for k, v in body.items() if k in ("treeName", "description")})
    return jsonify(tree), 200


@trees_bp.delete("/<tree_id>")
@require_auth
def delete_tree(tree_id):
    if not _owned_tree(tree_id):
        return jsonify({"error": "Tree not found"}), 404
    _state().trees.pop(tree_id)
    return "", 204


@trees_bp.get("/<tree_id>/nodes")
@require_auth
def list_nodes(tree_id):
    return jsonify([n for n in _state().nodes.values() if n["treeId"] == tree_id]), 200


@trees_bp.post("/<tree_id>/nodes")
@require_auth
def create_node(tree_id):
    if not _owned_tree(tree_id):
        return jsonify({"error": "Tree not found"}), 404
    body = request.get_json(force=True) or {}
    node = {**body, "nodeId": str(uuid.uuid4()), "treeId": tree_id, "status": "draft", "createdBy": g.user_id}
    _state().nodes[node["nodeId"]] = node
    return jsonify(node), 201


@trees_bp.post("/<tree_id>/nodes/<node_id>/publish")
@require_auth
def publish_node(tree_id, node_id):
    node = _state().nodes.get(node_id)
    if not node or node["treeId"] != tree_id:
        return jsonify({"error": "Node not found"}), 404
    node["status"] = "published"
    return jsonify(node), 200


@misc_bp.get("/comments")
@require_auth
def list_comments():
    args = request.args
    items = [
        c
        for c in _state().comments.values()
        if c["treeId"] == args.get("treeId")
        and c["entityType"] == args.get("entityType")
        and c["entityId"] == args.get("entityId")
    ]
    return jsonify(items), 200


@misc_bp.post("/comments")
@require_auth
def create_comment():
    body = request.get_json(force=True) or {}
    comment = {**body, "commentId": str(uuid.uuid4()), "userId": g.user_id}
    _state().comments[comment["commentId"]] = comment
    return jsonify(comment), 201


@misc_bp.get("/notifications")
@require_auth
def list_notifications():
    unread_only = request.args.get("unreadOnly") == "true"
    items = [
        n
        for n in _state().notifications.values()
        if n["userId"] == g.user_id and not (unread_only and n["isRead"])
    ]
    return jsonify(items), 200


@misc_bp.put("/notifications/read-all")
@require_auth
def mark_all_read():
    for n in _state().notifications.values():
        if n["userId"] == g.user_id:
            n["isRead"] = True
    return "", 204


@misc_bp.put("/notifications/<notification_id>/read")
@require_auth
def mark_read(notification_id):
    item = _state().notifications.get(notification_id)
    if not item or item["userId"] != g.user_id:
        return jsonify({"error": "Notification not found"}), 404
    item["isRead"] = True
    return "", 204


@misc_bp.get("/search")
@require_auth
def search():
    q = (request.args.get("q") or "").lower()
    tree_id = request.args.get("treeId")
    first_name = request.args.get("firstName")
    results = []
    for node in _state().nodes.values():
        if tree_id and node["treeId"] != tree_id:
            continue
        if first_name and node.get("firstName") != first_name:
            continue
        haystack = " ".join(str(node.get(k) or "") for k in ("firstName", "lastName", "petName")).lower()
        if q in haystack:
            results.append({**node, "treeName": _state().trees[node["treeId"]]["treeName"]})
    return jsonify(results), 200


def create_backend(state: Optional[BackendState] = None) -> Flask:
    app = Flask(__name__)
    app.config["STATE"] = state or BackendState()

    @app.before_request
    def _record():
        app.config["STATE"].requests_seen.append(
            (request.method, request.path, request.headers.get("Authorization"))
        )

    app.register_blueprint(auth_bp, url_prefix=f"{API_PREFIX}/auth")
    app.register_blueprint(trees_bp, url_prefix=f"{API_PREFIX}/trees")
    app.register_blueprint(misc_bp, url_prefix=API_PREFIX)
    return app


class FlaskAdapter(BaseAdapter):
    """``requests`` transport adapter that dispatches to a Flask test client."""

    def __init__(self, app: Flask):
        super().__init__()
        self.app = app

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        parts = urlsplit(request.url)
        body = request.body
        if isinstance(body, str):
            body = body.encode("utf-8")
        headers = {k: v for k, v in request.headers.items() if k.lower() != "content-length"}
        result = self.app.test_client().open(
            parts.path,
            method=request.method,
            query_string=parts.query,
            headers=headers,
            data=body or None,
        )
        resp = requests.Response()
        resp.status_code = result.status_code
        resp._content = result.get_data()
        resp.headers = CaseInsensitiveDict(dict(result.headers))
        resp.reason = result.status.split(" ", 1)[1] if " " in result.status else ""
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass
