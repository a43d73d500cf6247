"""Poll the telemetry server and print ``key=value`` lines.

Usage:
  ets2-monitor
  ets2-monitor --base-url http://192.168.0.10:25555 --update-freq 100
  ets2-monitor --count 1 --exit-on-error

Stop with Ctrl+C.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

from ets2_telemetry.config import read_config
from ets2_telemetry.telemetry import TelemetryClient, TelemetryError, TelemetrySnapshot, new_client

logger = logging.getLogger("ets2_telemetry.monitor")


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def format_values(t: TelemetrySnapshot, sep: str = "\n") -> List[str]:
    return [
        f"rpm={t.truck.engine_rpm:f}{sep}",
        f"kmh={t.truck.speed:f}{sep}",
    ]


def run(
    client: TelemetryClient,
    out: TextIO,
    update_freq: int,
    count: int = 0,
    exit_on_error: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Polling loop. Returns the process exit code."""
    polls = 0
    while count <= 0 or polls < count:
        polls += 1
        try:
            t = client.get_telemetry()
        except TelemetryError as e:
            if exit_on_error:
                logger.error("Error reading telemetry data: %s", e)
                return 1
            logger.warning("Error reading telemetry data: %s", e)
        else:
            for line in format_values(t):
                out.write(line)
            out.flush()
        if count <= 0 or polls < count:
            sleep(update_freq / 1000.0)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Print ETS2/ATS telemetry as key=value lines")
    ap.add_argument("--config", default=None, help="INI file (default: ./ets2_telemetry.ini)")
    ap.add_argument("--base-url", default=None, help="HTTP url of the telemetry server")
    ap.add_argument("--update-freq", type=_non_negative_int, default=None, help="Milliseconds between polls")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    ap.add_argument("--count", type=_non_negative_int, default=0, help="Number of polls, 0 = forever")
    ap.add_argument("--exit-on-error", action="store_true", help="Stop on the first failed poll")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = read_config(args.config)
    except TelemetryError as e:
        logger.error("%s", e)
        return 2

    timeout = cfg["timeout"]
    if args.timeout is not None:
        timeout = args.timeout if args.timeout > 0 else None
    client = new_client(args.base_url or cfg["base_url"], timeout=timeout)
    update_freq = args.update_freq if args.update_freq is not None else cfg["update_freq"]
    logger.info("Polling %s every %d ms", client.url, update_freq)

    try:
        return run(client, sys.stdout, update_freq, count=args.count, exit_on_error=args.exit_on_error)
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
