"""JSON structured logging for the Lantern API and CLI."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "lantern"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# Lantern's own packages; the CLI's --verbose only opens these up
APP_LOGGERS = ("analyzers", "api", "blocklist", "engine")


def build_formatter(surface: str) -> JsonFormatter:
    """JSON formatter stamping every record with the service and surface."""
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        static_fields={"service": SERVICE_NAME, "surface": surface},
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def _install_root_handler(formatter: JsonFormatter, level: int) -> logging.Handler:
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # stderr keeps CLI stdout clean for --json output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    return handler


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root and uvicorn loggers for the API server."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    handler = _install_root_handler(build_formatter("api"), level)

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.addHandler(handler)
        uv_logger.propagate = False


def setup_cli_logging(verbose: bool = False) -> None:
    """
    Configure logging for one CLI run.

    Only warnings reach stderr by default. With verbose, Lantern's own
    loggers drop to DEBUG while third-party libraries stay at WARNING.
    """
    _install_root_handler(build_formatter("cli"), logging.WARNING)

    app_level = logging.DEBUG if verbose else logging.WARNING
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(app_level)
