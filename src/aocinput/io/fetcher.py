"""Authenticated download of a single day's input."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import requests

from aocinput.config.models import RemoteConfig
from aocinput.errors import InvalidTokenError, RemoteRejectedError, TransientNetworkError

logger = logging.getLogger(__name__)

MAX_DIAGNOSTIC_CHARS = 500


class HttpSession(Protocol):
    """The subset of :class:`requests.Session` the fetcher relies on."""

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        ...


@dataclass(frozen=True)
class FetchRequest:
    """One download: which puzzle and whose session."""

    year: int
    day: int
    token: str

    def __repr__(self) -> str:
        return f"FetchRequest(year={self.year}, day={self.day}, token='***')"


def input_url(year: int, day: int, *, base_url: str) -> str:
    return f"{base_url}/{year}/day/{day:02d}/input"


def session_cookie(token: str, *, cookie_name: str = "session") -> str:
    """Build the Cookie header value; tokens already carrying the name pass through."""
    token = token.strip()
    if not token:
        raise InvalidTokenError("token is empty")
    if any(ord(char) < 0x20 or ord(char) == 0x7F or char in ";," for char in token):
        raise InvalidTokenError("token contains control characters or cookie separators")
    if token.startswith(f"{cookie_name}="):
        return token
    return f"{cookie_name}={token}"


def fetch_input(
    request: FetchRequest,
    *,
    remote: RemoteConfig | None = None,
    session: HttpSession | None = None,
) -> bytes:
    """Download the input for `request` and return the body unmodified.

    Raises :class:`TransientNetworkError` when no response is received and
    :class:`RemoteRejectedError` for any non-2xx status. A token that cannot be
    sent as a cookie raises :class:`InvalidTokenError` before any request.
    Nothing is retried.
    """
    remote = remote or RemoteConfig()
    url = input_url(request.year, request.day, base_url=remote.base_url)
    headers = {
        "User-Agent": remote.user_agent,
        "Cookie": session_cookie(request.token, cookie_name=remote.cookie_name),
    }

    logger.info("Fetching %s", url)
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, headers=headers, timeout=remote.timeout_seconds)
        if not 200 <= response.status_code < 300:
            raise RemoteRejectedError(
                url,
                response.status_code,
                response.text[:MAX_DIAGNOSTIC_CHARS],
                day=request.day,
                year=request.year,
            )
        body = response.content
    except requests.RequestException as exc:
        raise TransientNetworkError(url, exc, day=request.day, year=request.year) from exc

    logger.debug("Received %d bytes for day %02d", len(body), request.day)
    return body


__all__ = ["FetchRequest", "HttpSession", "fetch_input", "input_url", "session_cookie"]
