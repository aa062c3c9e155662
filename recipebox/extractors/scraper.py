"""
Web page fetching for recipe extraction.

This module downloads the HTML of a recipe page with a browser-like
cloudscraper session. It performs exactly one request per call; retrying
is left to the caller.
"""
from __future__ import annotations

import ipaddress
import logging
from urllib.parse import urlparse

import cloudscraper
import requests

from ..const import (
    ALLOWED_CONTENT_TYPES,
    BROWSER_SETTINGS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_MAX_RESPONSE_SIZE,
    DEFAULT_TIMEOUT,
)

_LOGGER = logging.getLogger(__name__)


def validate_url(url: str) -> None:
    """Validate URL scheme and refuse internal IP addresses.

    Raises:
        ValueError: If the URL is empty, not HTTP/HTTPS, or targets a
            private, loopback or link-local address
    """
    if not url or not url.strip():
        raise ValueError("URL cannot be empty")

    parsed = urlparse(url.strip())
    if parsed.scheme not in ('http', 'https'):
        raise ValueError("Only HTTP/HTTPS protocols allowed")
    if not parsed.hostname:
        raise ValueError(f"URL has no host: {url}")

    try:
        ip = ipaddress.ip_address(parsed.hostname)
    except ValueError:
        return  # Hostname is not an IP

    if ip.is_private or ip.is_loopback or ip.is_link_local:
        raise ValueError("Cannot access internal IP addresses")


def create_session() -> requests.Session:
    """Create a cloudscraper session posing as a desktop browser."""
    session = cloudscraper.create_scraper(browser=dict(BROWSER_SETTINGS))
    session.max_redirects = DEFAULT_MAX_REDIRECTS
    return session


def _read_limited(response: requests.Response, url: str) -> bytes:
    """Download the body, enforcing DEFAULT_MAX_RESPONSE_SIZE."""
    content_length = response.headers.get('content-length')
    if content_length and content_length.isdigit() and int(content_length) > DEFAULT_MAX_RESPONSE_SIZE:
        _LOGGER.warning("Response too large for %s: %s bytes", url, content_length)
        raise ValueError(
            f"Response size ({content_length} bytes) exceeds maximum allowed size ({DEFAULT_MAX_RESPONSE_SIZE} bytes)")

    content = bytearray()
    for chunk in response.iter_content(chunk_size=8192):
        content.extend(chunk)
        if len(content) > DEFAULT_MAX_RESPONSE_SIZE:
            _LOGGER.warning("Response exceeded size limit while downloading from %s", url)
            raise ValueError(
                f"Response size exceeds maximum allowed size ({DEFAULT_MAX_RESPONSE_SIZE} bytes)")
    return bytes(content)


def fetch_page_html(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> str:
    """Fetch the HTML of a recipe page.

    Args:
        url: The URL of the recipe website
        timeout: Request timeout in seconds
        session: Optional session to reuse; a cloudscraper session by default

    Returns:
        The decoded page HTML

    Raises:
        ValueError: If the URL is invalid, or the response is not HTML or too large
        requests.exceptions.RequestException: On network errors and non-2xx statuses
    """
    validate_url(url)
    session = session or create_session()

    _LOGGER.info("Fetching recipe page %s", url)
    response = session.get(url, timeout=timeout, allow_redirects=True, stream=True)
    try:
        response.raise_for_status()

        content_type = response.headers.get('content-type', '').lower()
        if content_type and not any(allowed in content_type for allowed in ALLOWED_CONTENT_TYPES):
            _LOGGER.warning("Invalid content type for %s: %s", url, content_type)
            raise ValueError(
                f"Invalid content type: {content_type}. Only HTML/XHTML content is allowed.")

        content = _read_limited(response, url)
    finally:
        response.close()

    # requests assumes ISO-8859-1 for text/* without a charset; pages are overwhelmingly UTF-8
    encoding = response.encoding if 'charset=' in content_type and response.encoding else 'utf-8'
    _LOGGER.debug("Fetched %d bytes from %s", len(content), url)
    try:
        return content.decode(encoding, errors='replace')
    except LookupError:
        _LOGGER.debug("Unknown charset %s for %s, decoding as UTF-8", encoding, url)
        return content.decode('utf-8', errors='replace')
