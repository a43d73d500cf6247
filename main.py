# -*- coding: utf-8 -*-
import sys
from ets2_telemetry.monitor import main

if __name__ == "__main__":
    sys.exit(main())
