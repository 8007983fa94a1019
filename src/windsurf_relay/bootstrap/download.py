"""HTTPS download of release archives.

Redirects are followed here rather than by urllib so that every hop goes
through the same scheme check and the same per-request timeout. GitHub
release downloads answer with a 302 to a storage host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin, urlparse
from urllib.request import HTTPRedirectHandler, Request, build_opener

from windsurf_relay.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT = 60


class FetchError(Exception):
    """Download failed.

    Attributes:
        status: HTTP status code of the failing response, or None for
            network-level errors.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


@dataclass
class HttpResponse:
    """A single HTTP exchange, before any redirect handling."""

    status: int
    location: Optional[str] = None
    body: bytes = b""


class _NoRedirectHandler(HTTPRedirectHandler):
    """Surface 3xx responses as HTTPError instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


def release_url(host: str, repository: str, tag: str, asset_name: str) -> str:
    """Download URL of a release asset.

    Example: ``https://github.com/owner/repo/releases/download/v1.0.0/asset.tar.gz``
    """
    return f"https://{host}/{repository}/releases/download/{tag}/{asset_name}"


def releases_page_url(host: str, repository: str) -> str:
    """Human-facing releases page for manual downloads."""
    return f"https://{host}/{repository}/releases"


def _check_scheme(url: str) -> None:
    if urlparse(url).scheme != "https":
        raise FetchError(f"Refusing to download over non-HTTPS URL: {url}")


def _request(url: str, user_agent: str, timeout: float) -> HttpResponse:
    """Perform one GET without following redirects."""
    opener = build_opener(_NoRedirectHandler)
    request = Request(url, headers={"User-Agent": user_agent})
    try:
        with opener.open(request, timeout=timeout) as response:  # nosec B310
            return HttpResponse(status=response.status, body=response.read())
    except HTTPError as e:
        location = e.headers.get("Location") if e.headers else None
        return HttpResponse(status=e.code, location=location)
    except (URLError, OSError, ValueError) as e:
        raise FetchError(f"Network error fetching {url}: {e}") from e


def fetch(
    url: str,
    *,
    user_agent: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """Download ``url`` and return the final response body.

    Any 3xx response carrying a ``Location`` header is followed, relative
    locations resolved against the current URL, for as many hops as the
    server sends.

    Args:
        url: HTTPS URL to fetch.
        user_agent: Value of the ``User-Agent`` header.
        timeout: Per-request timeout in seconds.

    Returns:
        Body of the final 200 response.

    Raises:
        FetchError: On a non-200, non-redirect response, a network error,
            or a non-HTTPS URL.
    """
    current = url
    while True:
        _check_scheme(current)
        LOGGER.debug(f"GET {current}")
        response = _request(current, user_agent, timeout)

        if 300 <= response.status < 400 and response.location:
            current = urljoin(current, response.location)
            LOGGER.debug(f"Redirected ({response.status}) to {current}")
            continue

        if response.status != 200:
            raise FetchError(f"HTTP {response.status}", status=response.status)

        return response.body
