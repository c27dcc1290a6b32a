"""Marketplace listings API client (lookup by name, then create or update)."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional
from urllib.parse import quote

from ..config import SyncConfig
from ..errors import RemoteError
from ..logging import get_logger
from ..models import RemoteResult, SubmissionPayload
from .policies import FailClosedPolicy, FailOpenPolicy
from .transport import HttpRequest, HttpResponse, Transport, urllib_transport

USER_AGENT = "marketsync/0.1.0"

_DETAIL_LIMIT = 200


class RegistryClient:
    """Upserts listings against a marketplace base URL such as ``https://host/v1``."""

    def __init__(
        self,
        config: SyncConfig,
        *,
        transport: Transport | None = None,
        lookup_policy: FailOpenPolicy | None = None,
        submit_policy: FailClosedPolicy | None = None,
    ) -> None:
        self.base_url = config.marketplace_url.rstrip("/")
        self._api_key = config.api_key
        self._timeout = config.request_timeout
        self._transport = transport or urllib_transport
        self.lookup_policy = lookup_policy or FailOpenPolicy()
        self.submit_policy = submit_policy or FailClosedPolicy(
            retries=config.submit_retries,
            backoff=config.retry_backoff,
        )
        self.logger = get_logger("registry")

    def find_by_name(self, name: str) -> Optional[str]:
        """Return the id of the listing named ``name``, or None.

        Any failure counts as "not found" so that a broken read never blocks
        the submission itself.
        """
        return self.lookup_policy.call(lambda: self._lookup(name), action="Listing lookup")

    def submit(self, payload: SubmissionPayload, existing_id: Optional[str] = None) -> RemoteResult:
        """Update ``existing_id`` when given, otherwise create a new listing."""
        if existing_id:
            method, url = "PUT", f"{self.base_url}/listings/{quote(existing_id, safe='')}"
        else:
            method, url = "POST", f"{self.base_url}/listings"

        body = payload.to_dict()
        self.logger.info("→ %s %s", method, url)
        self.logger.debug("Payload: %s", json.dumps(body, indent=2))

        response_body = self.submit_policy.call(
            lambda: self._send(method, url, body),
            action=f"{method} {url}",
        )

        listing_id = _extract_id(response_body) or existing_id or "unknown"
        return RemoteResult(
            listing_id=listing_id,
            status="updated" if existing_id else "created",
            listing_url=self.listing_url(listing_id),
            body=response_body,
        )

    def listing_url(self, listing_id: str) -> str:
        """Public page of a listing: the API base without ``/v1`` plus ``/listing/<id>``."""
        site = self.base_url.removesuffix("/v1")
        return f"{site}/listing/{listing_id}"

    # ------------------------------------------------------------------
    # Helpers

    def _lookup(self, name: str) -> Optional[str]:
        url = f"{self.base_url}/listings?name={quote(name, safe='')}"
        body = self._send("GET", url, None)
        if not isinstance(body, dict):
            return None
        data = body.get("data")
        if not isinstance(data, list) or not data:
            return None
        first = data[0]
        if not isinstance(first, dict):
            return None
        return _as_id(first.get("id"))

    def _send(self, method: str, url: str, body: Optional[Dict[str, Any]]) -> Any:
        request = HttpRequest(
            method=method,
            url=url,
            headers=self._headers(),
            body=json.dumps(body).encode("utf-8") if body is not None else None,
            timeout=self._timeout,
        )
        response = self._transport(request)
        if not response.ok:
            raise RemoteError(response.status, _error_detail(response), url)
        return response.json()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }


def _error_detail(response: HttpResponse) -> str:
    parsed = response.json()
    if isinstance(parsed, dict):
        for key in ("message", "error"):
            value = parsed.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value)
        return json.dumps(parsed)
    if isinstance(parsed, list):
        return json.dumps(parsed)
    return response.text[:_DETAIL_LIMIT]


def _extract_id(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    listing_id = _as_id(body.get("id"))
    if listing_id:
        return listing_id
    data = body.get("data")
    if isinstance(data, dict):
        return _as_id(data.get("id"))
    return None


def _as_id(value: Any) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int)):
        text = str(value)
        return text or None
    return None


__all__ = ["RegistryClient", "USER_AGENT"]
