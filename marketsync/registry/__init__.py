"""Marketplace registry client, transport and error policies."""

from .client import USER_AGENT, RegistryClient
from .policies import FailClosedPolicy, FailOpenPolicy
from .transport import HttpRequest, HttpResponse, Transport, urllib_transport

__all__ = [
    "FailClosedPolicy",
    "FailOpenPolicy",
    "HttpRequest",
    "HttpResponse",
    "RegistryClient",
    "Transport",
    "USER_AGENT",
    "urllib_transport",
]
