# ets2_telemetry/telemetry/http.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Union

import requests

from .errors import TransportError, UnexpectedStatusError
from .mappers.funbit import parse_telemetry
from .model import TelemetrySnapshot

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:25555"
TELEMETRY_PATH = "/api/ets2/telemetry"
DEFAULT_TIMEOUT = 2.0

# sentinel: "use the client's timeout"
_CLIENT_TIMEOUT = object()


def _no_limit_if_non_positive(timeout: Optional[float]) -> Optional[float]:
    # requests rejects 0 and negative timeouts; here they mean "no limit"
    if timeout is not None and timeout <= 0:
        return None
    return timeout


@dataclass(frozen=True)
class TelemetryClient:
    """
    Client for the ETS2/ATS telemetry server (Funbit protocol).

    Holds nothing but the base URL and the timeout, so one instance can be
    shared between threads. Each call opens and closes its own connection.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT  # seconds, None or <= 0 = wait forever

    def __post_init__(self) -> None:
        object.__setattr__(self, "timeout", _no_limit_if_non_positive(self.timeout))

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + TELEMETRY_PATH

    # ---------------------------------------------------------------
    # Low level fetch
    # ---------------------------------------------------------------
    def _fetch(self, timeout: Optional[float]) -> bytes:
        """Raw body of one GET, status already checked."""
        url = self.url
        logger.debug("GET %s (timeout=%s)", url, timeout)
        try:
            with requests.get(url, timeout=timeout) as r:
                if r.status_code != 200:
                    raise UnexpectedStatusError(r.status_code, url)
                return r.content
        except requests.RequestException as e:
            logger.debug("GET %s failed: %s", url, e)
            raise TransportError(f"telemetry request to {url} failed: {e}", cause=e) from e

    # ---------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------
    def get_telemetry(self, timeout: Union[float, None, object] = _CLIENT_TIMEOUT) -> TelemetrySnapshot:
        """
        Fetch and decode one snapshot.

        Raises TransportError, UnexpectedStatusError or DecodeError.
        """
        if timeout is _CLIENT_TIMEOUT:
            timeout = self.timeout
        return parse_telemetry(self._fetch(_no_limit_if_non_positive(timeout)))
