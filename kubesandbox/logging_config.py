"""
Logging setup for the Kubesandbox API.

Probe traffic to the health endpoints is dropped from the uvicorn access
log; everything else goes to stdout.
"""

import logging
import logging.config
from typing import Any, Dict, FrozenSet

HEALTH_PATHS: FrozenSet[str] = frozenset({"/health", "/healthz"})

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access records for GET requests to the health endpoints."""

    def __init__(self, paths: FrozenSet[str] = HEALTH_PATHS):
        super().__init__()
        self.paths = paths

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access records carry (client, method, path, http_version, status)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        method, path = args[1], str(args[2])
        return not (method == "GET" and path.split("?", 1)[0] in self.paths)


def _logger(handler: str, level: str) -> Dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """
    Build the dictConfig for the API process.

    Args:
        level: Level for the kubesandbox loggers

    Returns:
        Configuration accepted by logging.config.dictConfig and uvicorn
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"health_check_filter": {"()": HealthCheckFilter}},
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_check_filter"],
            },
        },
        "loggers": {
            "uvicorn": _logger("default", "INFO"),
            "uvicorn.access": _logger("access", "INFO"),
            "kubesandbox": _logger("default", level),
        },
        # Root only sets a threshold; named loggers own the handlers
        "root": {"level": "WARNING"},
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
