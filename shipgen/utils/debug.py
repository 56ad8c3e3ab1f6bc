import os
from datetime import datetime

from shipgen.domain.config import DEBUG_ENV_VAR

# -----------------------------
# Debug helpers (enable with --debug or env SHIPGEN_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = "shipgen_debug.log"

_TRUTHY = {"1", "true", "yes", "on"}


def env_debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def enable_debug(path: str = None) -> None:
    global DEBUG_ENABLED, DEBUG_LOG_PATH
    DEBUG_ENABLED = True
    if path:
        DEBUG_LOG_PATH = path


def _debug_log_line(line: str) -> None:
    # Logging must never take generation down with it.
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_event(title: str, message: str, details: str = "", *, level: str = "info") -> None:
    """Append a debug event to the log file when debugging is enabled."""
    if not DEBUG_ENABLED:
        return
    _debug_log_line(f"{level.upper()} | {title} | {message}")
    if details:
        for ln in details.splitlines():
            _debug_log_line(f"    {ln}")
