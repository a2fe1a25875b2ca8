"""Runtime configuration for the City Route Planner backend.

Values are plain module-level constants so every module can import them
directly. Each one can be overridden through an environment variable
prefixed with ``CITYROUTE_`` (e.g. ``CITYROUTE_LOG_LEVEL=DEBUG``).
"""

from __future__ import annotations

import logging
import os
from typing import List


def _env(name: str, default: str) -> str:
    return os.environ.get(f"CITYROUTE_{name}", default)


# Origins of the map frontend allowed to call this API from the browser.
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _env("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]

# Distance (miles) given to a new road when the caller did not supply a usable one
DEFAULT_ROAD_DISTANCE: float = float(_env("DEFAULT_ROAD_DISTANCE", "100"))

# Average speed (miles per hour) behind the route summary travel-time estimate
AVERAGE_SPEED: float = float(_env("AVERAGE_SPEED", "60"))

LOG_LEVEL: str = _env("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install a basic stream handler for the ``cityroute`` logger tree."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("cityroute").setLevel(level)
