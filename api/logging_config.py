"""
Centralized logging configuration for the API process.

Quiets the HTTP client libraries used by the OpenAI SDK, which would
otherwise log every request line at INFO.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Suppress per-request chatter from the upstream client stack
_SUPPRESSED_LOGGERS = [
    'httpx',
    'httpcore',
    'openai',
]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at startup"""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    for logger_name in _SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
