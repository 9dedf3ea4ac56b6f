from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.exceptions import AuthenticationError, BackendError
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def send(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    fallback: str,
    json: Optional[dict] = None,
) -> requests.Response:
    """Issue one request and turn every failure into a BackendError.

    `fallback` is the message used when the backend gives no usable error text.
    """
    url = conn.url(path)
    try:
        response = conn.session.request(method, url, json=json, timeout=conn.config.timeout)
    except requests.exceptions.RequestException as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise BackendError(fallback) from exc

    if response.status_code in (401, 403):
        raise AuthenticationError(error_message(response, fallback), status_code=response.status_code)
    if response.status_code >= 400:
        raise BackendError(error_message(response, fallback), status_code=response.status_code)
    return response


def decode_body(response: requests.Response) -> Any:
    """JSON body when there is one, else the raw text, else None."""
    text = response.text
    if not text or not text.strip():
        return None
    try:
        return response.json()
    except ValueError:
        return text


def error_message(response: requests.Response, fallback: str) -> str:
    body = decode_body(response)
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
        return fallback
    if isinstance(body, str) and body.strip():
        return body.strip()
    return fallback


def read_message(response: requests.Response, default: str = "") -> str:
    body = decode_body(response)
    if isinstance(body, dict):
        message = body.get("message")
        return str(message) if message else default
    if isinstance(body, str):
        return body.strip() or default
    return default
