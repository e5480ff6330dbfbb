"""
Shared HTTP client for provider adapters.

Provides a pre-configured ``requests.Session`` with a default timeout and a
User-Agent (Wikimedia rejects anonymous clients). Fetches are single-shot:
the mounted ``Retry`` allows no retries, a failed call fails its pair and the
user reloads.

Usage::

    from spurious_correlations.services.http import get_json

    payload = get_json("https://api.example.com/v1/data", provider="example")
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from spurious_correlations import __version__
from spurious_correlations.errors import FetchError

#: Fetch-or-fail: no retries, status handling left to ``get_json``.
DEFAULT_RETRY = Retry(
    total=0,
    redirect=5,
    raise_on_status=False,
    raise_on_redirect=False,
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"spurious-correlations/{__version__} (python-requests)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.headers["Accept"] = "application/json"

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def get_json(
    url: str,
    *,
    provider: str,
    params: dict[str, Any] | None = None,
) -> Any:
    """
    GET ``url`` and decode the JSON body.

    Raises:
        FetchError: transport failure, non-2xx status, or a body that is not
            JSON. Carries ``provider`` and the HTTP status when there is one.
    """
    try:
        resp = session.get(url, params=params or {})
    except requests.RequestException as exc:
        raise FetchError(provider, message=str(exc)) from exc

    if not resp.ok:
        raise FetchError(provider, status=resp.status_code, message=resp.reason or None)

    try:
        return resp.json()
    except ValueError as exc:
        raise FetchError(provider, status=resp.status_code, message="invalid JSON body") from exc
