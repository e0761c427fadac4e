"""
HTTP session used to download gallery pages.

Gallery sites are small personal hosts that rate-limit or drop
connections under load, so page GETs are retried on 429 and 5xx gateway
errors with a short backoff, and every request gets a timeout so one
stalled host can't hang a fetch run. The session asks for HTML and
identifies the scraper in its User-Agent.

Usage::

    from butterfly_gallery.services.http import session

    resp = session.get("https://example.org/gallery/danaus.html")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 20  # seconds

USER_AGENT = "butterfly-gallery/0.1 (gallery sightings extractor)"
ACCEPT_HTML = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.5"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a session for fetching gallery pages.

    Args:
        retry: Retry policy for page GETs (defaults to ``DEFAULT_RETRY``).
        timeout: Seconds to wait on a gallery host when the caller
            doesn't pass its own ``timeout``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept": ACCEPT_HTML})

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Shared by every gallery fetch.
session: requests.Session = create_session()
