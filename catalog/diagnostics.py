from datetime import datetime, timezone

from utils.app_logger import get_logger

log = get_logger("store")


def log_backend_call_failure(method: str, error: BaseException, *, timestamp: str | None = None) -> None:
    """Structured log line for a failed record store call."""
    log.error(
        "[Backend Call Failed] %s: %r",
        method,
        error,
        extra={
            "store_method": method,
            "store_error": repr(error),
            "store_timestamp": timestamp or datetime.now(timezone.utc).isoformat(),
        },
    )
