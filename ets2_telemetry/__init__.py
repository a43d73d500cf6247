"""Client for the Euro Truck Simulator 2 / American Truck Simulator telemetry server."""

from ets2_telemetry.telemetry import *  # noqa: F401,F403
from ets2_telemetry.telemetry import __all__

__version__ = "0.1.0"
