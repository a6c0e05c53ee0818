"""Fetch published module versions from a Go module proxy."""

from __future__ import annotations

import logging

import httpx

from mod_check.config.settings import settings

logger = logging.getLogger(__name__)

# The proxy answers these for modules it does not know.
_NOT_FOUND = {404, 410}


class ProxyError(RuntimeError):
    """The proxy could not be reached or returned an error."""


def escape_module_path(path: str) -> str:
    """Case-encode a module path for proxy URLs (``A`` becomes ``!a``)."""
    return "".join(f"!{c.lower()}" if c.isupper() else c for c in path)


class ProxyClient:
    """Thin wrapper around an ``httpx.Client`` speaking the GOPROXY protocol."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.proxy_url).rstrip("/")
        self._client = httpx.Client(
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
            follow_redirects=True,
        )

    def version_list_url(self, module_path: str) -> str:
        return f"{self.base_url}/{escape_module_path(module_path)}/@v/list"

    def fetch_version_list(self, module_path: str) -> str:
        """Return the raw newline-separated version list for a module."""
        url = self.version_list_url(module_path)
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
            if response.status_code in _NOT_FOUND:
                logger.debug("Proxy has no versions for %s", module_path)
                return ""
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ProxyError(f"failed to fetch versions of {module_path}: {exc}") from exc
        return response.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ProxyClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
