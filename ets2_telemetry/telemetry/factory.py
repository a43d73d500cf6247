# ets2_telemetry/telemetry/factory.py
from __future__ import annotations
from typing import Any, Mapping, Optional

from .http import DEFAULT_TIMEOUT, TelemetryClient


def new_client(base_url: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> TelemetryClient:
    """Client for the telemetry server at ``base_url`` (e.g. http://localhost:25555)."""
    return TelemetryClient(base_url=base_url, timeout=timeout)


def build_client(cfg: Optional[Mapping[str, Any]] = None) -> TelemetryClient:
    """
    Build a client from a configuration mapping (see ``ets2_telemetry.config``).
    Reads the default INI file when ``cfg`` is not given.
    """
    if cfg is None:
        from ets2_telemetry.config import read_config
        cfg = read_config()
    return new_client(cfg["base_url"], timeout=cfg.get("timeout", DEFAULT_TIMEOUT))
