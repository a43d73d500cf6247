# ets2_telemetry/telemetry/mappers/funbit.py
from __future__ import annotations
import logging
from typing import Union

from pydantic import ValidationError

from ..errors import DecodeError
from ..model import TelemetrySnapshot

logger = logging.getLogger(__name__)


def parse_telemetry(payload: Union[bytes, str]) -> TelemetrySnapshot:
    """
    Decode a telemetry server JSON document into a TelemetrySnapshot.

    - missing keys or nulls -> zero values,
    - unknown keys -> ignored,
    - key casing does not matter,
    - not JSON / wrong type on a present key -> DecodeError.
    """
    raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    try:
        return TelemetrySnapshot.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("telemetry decode failed: %s", e)
        first = e.errors()[0] if e.errors() else {}
        where = ".".join(str(p) for p in first.get("loc", ())) or "<document>"
        raise DecodeError(f"cannot decode telemetry at {where}: {first.get('msg', e)}", payload=raw, cause=e) from e


def dump_telemetry(snapshot: TelemetrySnapshot) -> bytes:
    """Encode a snapshot with the server's camelCase keys."""
    return snapshot.model_dump_json(by_alias=True).encode("utf-8")
