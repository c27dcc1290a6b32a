"""Minimal HTTP request/response abstraction for the marketplace API."""

from __future__ import annotations

import http.client
import json
import socket
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..errors import NetworkError


@dataclass
class HttpRequest:
    """Outbound request handed to a transport."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: Optional[float] = None


@dataclass
class HttpResponse:
    """Status and raw body of a completed request."""

    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Return the decoded JSON body, or the raw text when it is not JSON."""
        try:
            return json.loads(self.text)
        except json.JSONDecodeError:
            return self.text


Transport = Callable[[HttpRequest], HttpResponse]


def urllib_transport(request: HttpRequest) -> HttpResponse:
    """Send ``request`` with urllib; HTTP error statuses come back as responses."""
    headers = dict(request.headers)
    if request.body is not None:
        headers["Content-Length"] = str(len(request.body))
    try:
        http_request = Request(
            request.url,
            data=request.body,
            headers=headers,
            method=request.method,
        )
        with urlopen(http_request, timeout=request.timeout) as response:  # type: ignore[arg-type]
            return HttpResponse(status=response.status, body=response.read())
    except HTTPError as exc:
        body = exc.read() if hasattr(exc, "read") else b""
        return HttpResponse(status=exc.code, body=body or b"")
    except URLError as exc:
        raise NetworkError(f"Network error calling marketplace API: {exc.reason}") from exc
    except (socket.timeout, TimeoutError) as exc:
        raise NetworkError(
            f"Network error calling marketplace API: timed out after {request.timeout}s"
        ) from exc
    except OSError as exc:
        raise NetworkError(f"Network error calling marketplace API: {exc}") from exc
    except http.client.HTTPException as exc:
        raise NetworkError(
            f"Network error calling marketplace API: {type(exc).__name__}: {exc}"
        ) from exc
    except ValueError as exc:
        raise NetworkError(f"Invalid marketplace API URL \"{request.url}\": {exc}") from exc


__all__ = ["HttpRequest", "HttpResponse", "Transport", "urllib_transport"]
