"""Compact logging for the HotelBook web app.

Produces one line per record:
  12:04:31 INFO    │ listings           │ Listing 7 created by alice
"""

import logging
import os
import sys
import time

from hotelbook.core.config import settings

# ── ANSI colours ────────────────────────────────────────────────────────────

BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
RED = "\033[91m"
YELLOW = "\033[93m"
CYAN = "\033[96m"

# Enable colours if stdout is a TTY or FORCE_COLOR is set (e.g. in Docker)
_use_colour = sys.stdout.isatty() or os.environ.get("FORCE_COLOR", "") == "1"
if not _use_colour:
    BOLD = DIM = RESET = RED = YELLOW = CYAN = ""


# ── Health-check filter ─────────────────────────────────────────────────────

class _HealthCheckFilter(logging.Filter):
    """Drop noisy health-check access log lines."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if "/health" in msg and ("200" in msg or "GET" in msg):
            return False
        return True


# ── Custom formatter ────────────────────────────────────────────────────────

_LEVEL_COLOURS = {
    "DEBUG": DIM,
    "INFO": CYAN,
    "WARNING": YELLOW,
    "ERROR": RED,
    "CRITICAL": f"{BOLD}{RED}",
}


class HotelBookFormatter(logging.Formatter):
    """Compact, colourful formatter.

    Output format:
      HH:MM:SS │ LEVEL │ short_name │ message
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = time.strftime("%H:%M:%S", time.localtime(record.created))

        level = record.levelname
        colour = _LEVEL_COLOURS.get(level, "")

        # Shorten logger name: "hotelbook.api.endpoints.listings" → "listings"
        name = record.name.rsplit(".", 1)[-1] if "." in record.name else record.name
        name = name[:18]

        msg = record.getMessage()

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            msg = f"{msg}\n{record.exc_text}"

        return f"{DIM}{ts}{RESET} {colour}{level:<7}{RESET} {DIM}│{RESET} {BOLD}{name:<18}{RESET} {DIM}│{RESET} {msg}"


# ── Setup ───────────────────────────────────────────────────────────────────

def setup_logging() -> None:
    """Configure application logging — call once at startup."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(HotelBookFormatter())
    root.addHandler(handler)
    root.setLevel(log_level)

    access_logger = logging.getLogger("uvicorn.access")
    access_logger.addFilter(_HealthCheckFilter())

    # Always suppress SQL echo
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    # passlib logs a warning per process about bcrypt version probing
    logging.getLogger("passlib").setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
