from enum import Enum
from typing import Any, Dict, Optional

import requests


def enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None and unwrap enum members."""
    return {k: enum_value(v) for k, v in data.items() if v is not None}


def response_payload(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def error_message(resp: requests.Response, payload: Any) -> str:
    if isinstance(payload, dict):
        detail = payload.get("error") or payload.get("message")
        if isinstance(detail, dict):
            detail = detail.get("message")
        if detail:
            return f"{resp.status_code}: {detail}"
    return f"{resp.status_code}: {resp.reason or 'request failed'}"


def elapsed_ms(started: Optional[float], now: float) -> int:
    return int((now - started) * 1000) if started else -1
