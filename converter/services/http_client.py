from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib. One GET per call, JSON body expected; any transport
level problem (connection failure, non-2xx status, undecodable body) is
reported as HttpError. No retries.
"""
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, Optional

logger = logging.getLogger("converter.http")


class HttpError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def get_json(url: str, *, timeout: Optional[float] = None) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        with urllib.request.urlopen(url, **kwargs) as resp:  # nosec B310
            if not 200 <= resp.status < 300:
                raise HttpError(f"HTTP {resp.status}", status=resp.status)
            data = resp.read()
    except urllib.error.HTTPError as e:
        raise HttpError(f"HTTP {e.code}", status=e.code) from e
    except (urllib.error.URLError, TimeoutError, OSError) as e:
        raise HttpError(f"request failed: {e}") from e
    try:
        payload = json.loads(data.decode("utf-8"))
    except ValueError as e:  # JSON / unicode decode
        raise HttpError(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise HttpError("unexpected JSON payload (expected object)")
    return payload
