# ets2_telemetry/telemetry/util.py
from __future__ import annotations
from functools import lru_cache
from typing import Any, Dict, Iterable, Mapping

from pydantic.alias_generators import to_camel


@lru_cache(maxsize=None)
def wire_names(model_cls) -> Dict[str, str]:
    """
    Map of lower-cased wire key -> field name for a model class.
    Covers the camelCase name, the field name itself and any legacy keys
    listed in the class' ``_legacy_keys``.
    """
    names: Dict[str, str] = {}
    for name, info in model_cls.model_fields.items():
        names[name.lower()] = name
        names[(info.serialization_alias or info.alias or to_camel(name)).lower()] = name
    for key, name in getattr(model_cls, "_legacy_keys", {}).items():
        names[key.lower()] = name
    return names


def fold_keys(data: Mapping[str, Any], names: Mapping[str, str]) -> Dict[str, Any]:
    """
    Rewrite wire keys to field names, case-insensitively.
    Unknown keys and JSON nulls are dropped so the field keeps its zero value.
    """
    out: Dict[str, Any] = {}
    for key, value in data.items():
        if value is None or not isinstance(key, str):
            continue
        name = names.get(key.lower())
        if name is not None:
            out[name] = value
    return out


def first_present(data: Mapping[str, Any], candidates: Iterable[str], default: Any = None) -> Any:
    """
    Value of the first candidate key present in ``data`` (case-insensitive).
    """
    lowered = {k.lower(): v for k, v in data.items() if isinstance(k, str)}
    for key in candidates:
        val = lowered.get(key.lower())
        if val is not None:
            return val
    return default
