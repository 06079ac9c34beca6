"""
Fetching shared schedules from the schedule website.

The website publishes shared schedules under

    GET /api/schedule/shared-schedules/code/<shareCode>
    GET /api/schedule/shared-schedules/public?semester=&page=&limit=

and wraps every response as {"success": bool, "data": ..., "message": str}.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests

from schedcompare.errors import FetchError, InvalidInput
from schedcompare.model import Schedule
from schedcompare.storage import schedule_from_dict

API_PREFIX = "/api/schedule/shared-schedules"
DEFAULT_TIMEOUT = 30


def _get_data(url: str, params: Optional[dict[str, Any]] = None, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """
    GET a website endpoint and unwrap its {"success", "data"} envelope.
    """
    try:
        resp = requests.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise FetchError(f"Request to {url} failed: {exc}", status_code=status) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise FetchError(f"Response from {url} is not JSON") from exc

    if not isinstance(payload, dict) or not payload.get("success"):
        message = payload.get("message") if isinstance(payload, dict) else None
        raise FetchError(f"Server reported failure for {url}: {message or 'unknown error'}")

    return payload.get("data")


def fetch_shared_schedule(base_url: str, share_code: str, timeout: float = DEFAULT_TIMEOUT) -> Schedule:
    """
    Load one public shared schedule by its share code.
    """
    code = share_code.strip().upper()
    if not code:
        raise InvalidInput("Share code must not be empty")

    url = f"{base_url.rstrip('/')}{API_PREFIX}/code/{code}"
    data = _get_data(url, timeout=timeout)
    if not isinstance(data, dict):
        raise FetchError(f"Unexpected schedule payload from {url}")
    return schedule_from_dict(data)


def fetch_public_schedules(
    base_url: str,
    semester: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Schedule]:
    """
    List one page of public shared schedules, newest first.
    """
    url = f"{base_url.rstrip('/')}{API_PREFIX}/public"
    params: dict[str, Any] = {"page": page, "limit": limit}
    if semester:
        params["semester"] = semester

    data = _get_data(url, params=params, timeout=timeout)
    schedules = data.get("schedules", []) if isinstance(data, dict) else []
    return [schedule_from_dict(item) for item in schedules]
