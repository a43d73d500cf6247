from .funbit import dump_telemetry, parse_telemetry

__all__ = ["dump_telemetry", "parse_telemetry"]
