from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger("client")

HARMONIZE_PATH = "/api/harmonize"


class GatewayUnavailable(RuntimeError):
    """Transport failure or non-2xx answer from the pairing gateway."""


class GatewayClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8076",
        *,
        timeout: float = 90.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def harmonize(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST one pairing request and return the decoded result object.
        """
        try:
            r = self._client.post(HARMONIZE_PATH, json=request)
            r.raise_for_status()
            data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            log.error("harmonize request failed: %s", e)
            raise GatewayUnavailable(str(e)) from e
        if not isinstance(data, dict):
            raise GatewayUnavailable("gateway answered with a non-object body")
        return data
