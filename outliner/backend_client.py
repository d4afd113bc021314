# outliner/backend_client.py
"""
Thin wrappers over the presentation backend's create/update endpoints.
Auth tokens are passed through per call and never logged or stored.
"""
import logging
from typing import Any, Dict, Optional

import requests

from .config import BACKEND_TIMEOUT, BACKEND_URL
from .schemas import PresentationPayload

logger = logging.getLogger(__name__)


class BackendError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: Optional[str]) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _url(base_url: Optional[str], path: str) -> str:
    return (base_url or BACKEND_URL).rstrip("/") + path


def _send(method: str, url: str, payload: PresentationPayload, token: Optional[str]) -> Dict[str, Any]:
    send = requests.post if method == "POST" else requests.put
    try:
        resp = send(url, headers=_headers(token), json=payload.to_wire(), timeout=BACKEND_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("backend %s %s failed: %s", method, url, e)
        raise BackendError(f"Backend unreachable: {e}") from e

    if resp.status_code >= 400:
        logger.warning("backend %s %s returned %s", method, url, resp.status_code)
        raise BackendError(f"Backend error: {resp.status_code} {resp.text}", status_code=resp.status_code)
    try:
        return resp.json()
    except ValueError:
        return {}


def create_presentation(
    payload: PresentationPayload,
    token: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    return _send("POST", _url(base_url, "/presentaciones"), payload, token)


def update_presentation(
    presentation_id: str,
    payload: PresentationPayload,
    token: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    if not presentation_id:
        raise ValueError("presentation_id is required")
    return _send("PUT", _url(base_url, f"/presentaciones/{presentation_id}"), payload, token)
