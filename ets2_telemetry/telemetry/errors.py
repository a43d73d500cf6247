# ets2_telemetry/telemetry/errors.py
from __future__ import annotations
from typing import Optional

# How much of an undecodable body is kept on DecodeError.
PAYLOAD_PREVIEW_LIMIT = 512


class TelemetryError(Exception):
    """Base class for everything the telemetry client raises."""


class TransportError(TelemetryError):
    """The request could not be completed (refused, timeout, DNS, dropped body)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnexpectedStatusError(TelemetryError):
    """The server answered with something other than 200."""

    def __init__(self, status_code: int, url: str = "") -> None:
        super().__init__(f"unexpected HTTP status {status_code} from {url or 'telemetry server'}")
        self.status_code = status_code
        self.url = url


class DecodeError(TelemetryError):
    """The body is not JSON, or a present field has the wrong type."""

    def __init__(self, message: str, payload: bytes = b"", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.payload = payload[:PAYLOAD_PREVIEW_LIMIT]
        self.cause = cause


class ConfigError(TelemetryError):
    """Invalid value in the INI configuration."""
