"""ETS2/ATS telemetry server client: data model, codec and HTTP client."""

from .errors import (
    ConfigError,
    DecodeError,
    TelemetryError,
    TransportError,
    UnexpectedStatusError,
)
from .factory import build_client, new_client
from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TELEMETRY_PATH, TelemetryClient
from .mappers.funbit import dump_telemetry, parse_telemetry
from .model import (
    Game,
    Job,
    Navigation,
    Placement,
    TelemetrySnapshot,
    Trailer,
    Truck,
    Vector,
)

__all__ = [
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DecodeError",
    "Game",
    "Job",
    "Navigation",
    "Placement",
    "TELEMETRY_PATH",
    "TelemetryClient",
    "TelemetryError",
    "TelemetrySnapshot",
    "Trailer",
    "TransportError",
    "Truck",
    "UnexpectedStatusError",
    "Vector",
    "build_client",
    "dump_telemetry",
    "new_client",
    "parse_telemetry",
]
