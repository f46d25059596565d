"""
Host page fetching.

The context extractors read page HTML.  When the page is not already
in memory it can be fetched over HTTP with :func:`fetch_page`, which
use ``requests``; an existing ``requests.Session`` may be passed in.
"""

import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; chatbox-engine)",
    "Accept": "text/html,application/xhtml+xml",
}


def fetch_page(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = 0,
    cookie: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> str:
    """Fetch the HTML of a host page.

    Parameters
    ----------
    url:
        Address of the page, including the protocol.
    session:
        An optional ``requests.Session``.  Plain ``requests.get`` is
        used when omitted.
    timeout:
        Request timeout in seconds.  0 means no timeout.
    cookie:
        An optional cookie string, for pages that need a signed-in user
        to show the editor.
    headers:
        Extra headers merged over the defaults.

    Returns
    -------
    str
        The response body.  HTTP and connection failures raise
        ``requests.exceptions.RequestException``.
    """
    request_headers = dict(DEFAULT_HEADERS)
    if cookie:
        request_headers["Cookie"] = cookie
    if headers:
        request_headers.update(headers)

    getter = session.get if session is not None else requests.get
    kwargs = {"headers": request_headers}
    if timeout > 0:
        kwargs["timeout"] = timeout

    logger.debug("[page_fetch] GET %s", url)
    response = getter(url, **kwargs)
    response.raise_for_status()
    return response.text


__all__ = ["fetch_page"]
