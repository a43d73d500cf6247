import os, configparser
from typing import Any, Dict, Optional

from ets2_telemetry.telemetry.errors import ConfigError

CONFIG_FILE = "ets2_telemetry.ini"

DEFAULTS = {
    "base_url": "http://localhost:25555",
    "timeout": "2.0",       # seconds, 0 = no limit
    "update_freq": "33",    # ms between polls (~30 Hz)
}


def _number(cp: configparser.ConfigParser, key: str, kind):
    raw = cp.get("telemetry", key, fallback=DEFAULTS[key]).strip()
    try:
        return kind(raw or DEFAULTS[key])
    except ValueError as e:
        raise ConfigError(f"[telemetry] {key}: invalid value {raw!r}") from e


def read_config(path: Optional[str] = None) -> Dict[str, Any]:
    cfg_path = os.path.abspath(path or CONFIG_FILE)
    cp = configparser.ConfigParser()
    cp.read_dict({"telemetry": {}})
    if os.path.exists(cfg_path):
        cp.read(cfg_path, encoding="utf-8")
    timeout = _number(cp, "timeout", float)
    update_freq = _number(cp, "update_freq", int)
    if update_freq < 0:
        raise ConfigError(f"[telemetry] update_freq: must be >= 0, got {update_freq}")
    return {
        "base_url": cp.get("telemetry", "base_url", fallback=DEFAULTS["base_url"]).strip() or DEFAULTS["base_url"],
        "timeout": timeout if timeout > 0 else None,
        "update_freq": update_freq,
    }
