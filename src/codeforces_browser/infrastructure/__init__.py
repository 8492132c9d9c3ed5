"""Adapters for the Codeforces API and the terminal."""

from .codeforces_client import CodeforcesApiClient
from .http_client import AsyncHTTPClient
from .interfaces import APIClientProtocol, HTTPClientProtocol, TerminalProtocol

__all__ = [
    "APIClientProtocol",
    "AsyncHTTPClient",
    "CodeforcesApiClient",
    "HTTPClientProtocol",
    "TerminalProtocol",
]
