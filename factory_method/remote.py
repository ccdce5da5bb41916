"""Request shaping for the simulated remote variants.

Nothing here opens a connection: requests are prepared so the exact method,
URL and body can be logged, then discarded.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Mapping

import requests

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "factory-method-lessons/0.1",
}


def is_absolute_http_url(value: object) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    parsed = urllib.parse.urlparse(value.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def join_url(base_url: str, *parts: str) -> str:
    segments = [base_url.rstrip("/")]
    segments.extend(str(part).strip("/") for part in parts if str(part).strip("/"))
    return "/".join(segments)


def prepare_request(
    method: str,
    url: str,
    *,
    json: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.PreparedRequest:
    merged = dict(DEFAULT_HEADERS)
    if headers:
        merged.update({str(k): str(v) for k, v in headers.items()})
    request = requests.Request(
        method=method.upper(),
        url=url,
        headers=merged,
        json=dict(json) if json is not None else None,
    )
    return request.prepare()


def log_request(
    logger: logging.Logger,
    prepared: requests.PreparedRequest,
    *,
    event: str,
    payload: Mapping[str, Any] | None = None,
) -> None:
    extra: dict[str, Any] = {"event": event, "method": prepared.method, "url": prepared.url}
    if payload is not None:
        extra["payload"] = dict(payload)
    logger.info("%s %s", prepared.method, prepared.url, extra=extra)


__all__ = ["DEFAULT_HEADERS", "is_absolute_http_url", "join_url", "log_request", "prepare_request"]
