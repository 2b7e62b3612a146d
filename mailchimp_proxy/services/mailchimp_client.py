# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP client for the MailChimp Marketing API (v3.0)."""
import time
from typing import Any, Dict, Optional

import httpx

from mailchimp_proxy.core.config import settings
from mailchimp_proxy.core.errors import MailChimpError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import MAILCHIMP_LATENCY, MAILCHIMP_REQUESTS

logger = get_logger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """MailChimp problem documents carry ``title`` and ``detail``."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("detail") or body.get("title")
        if message:
            return message
    return resp.text or f"MailChimp responded with HTTP {resp.status_code}"


class MailChimpClient:
    def __init__(self, api_key: str = None, base_url: str = None,
                 timeout: float = None, transport: httpx.BaseTransport = None):
        self._api_key = settings.MAILCHIMP_API_KEY if api_key is None else api_key
        self._base_url = (base_url or settings.MAILCHIMP_API_URL).rstrip("/")
        self._timeout = settings.MAILCHIMP_TIMEOUT if timeout is None else timeout
        self._transport = transport

    def post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", path, body)

    def patch(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", path, body)

    def delete(self, path: str) -> Dict[str, Any]:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str,
                 body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self._base_url}/{path.lstrip('/')}"
        start = time.monotonic()
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport,
                              auth=("anystring", self._api_key)) as client:
                resp = client.request(method, url, json=body)
        except httpx.HTTPError as exc:
            MAILCHIMP_REQUESTS.labels(method=method, status="error").inc()
            logger.warning("MailChimp unreachable method=%s path=%s: %s", method, path, exc)
            raise MailChimpError(str(exc) or exc.__class__.__name__) from exc
        finally:
            MAILCHIMP_LATENCY.labels(method=method).observe(time.monotonic() - start)

        MAILCHIMP_REQUESTS.labels(method=method, status=str(resp.status_code)).inc()
        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("MailChimp error method=%s path=%s status=%d: %s",
                           method, path, resp.status_code, message)
            raise MailChimpError(message, status=resp.status_code)

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("MailChimp returned a non-JSON body method=%s path=%s", method, path)
            raise MailChimpError("MailChimp returned an unreadable response",
                                 status=resp.status_code) from exc
