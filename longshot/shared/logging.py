import logging
import re

import bittensor as bt

_API_KEY_PATTERN = re.compile(r"(apiKey=)[^&\s\"']+", re.IGNORECASE)
_REDACTED = r"\1***"

_HTTP_LOGGERS = ("httpx", "httpcore")

_LEVEL_SETTERS = {
    "TRACE": "set_trace",
    "DEBUG": "set_debug",
    "INFO": "set_info",
    "WARNING": "set_warning",
}


def redact_secrets(text: str) -> str:
    return _API_KEY_PATTERN.sub(_REDACTED, text)


class _ApiKeyRedactFilter(logging.Filter):
    """Strip apiKey query values from request log lines (httpx logs full URLs)."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except Exception:
            return True
        redacted = redact_secrets(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


_api_key_filter = _ApiKeyRedactFilter()


def install_secret_redaction() -> None:
    for name in _HTTP_LOGGERS:
        logger = logging.getLogger(name)
        if _api_key_filter not in logger.filters:
            logger.addFilter(_api_key_filter)


def configure_logging(level: str = "INFO", redact: bool = True) -> None:
    """Set the bittensor logging level and guard request logs against key leaks."""
    setter = _LEVEL_SETTERS.get(level.upper())
    if setter is None:
        raise ValueError(f"unknown log level: {level}")
    getattr(bt.logging, setter)(True)
    if redact:
        install_secret_redaction()
