import logging
import sys

import structlog

_HANDLER_NAME = "reeks_fallback_handler"


def _configure_structlog() -> None:
    """Routes structlog through stdlib logging with JSON output."""
    if structlog.is_configured():
        return

    # Fallback only. Applications that configure logging themselves win.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.set_name(_HANDLER_NAME)

    root_logger = logging.getLogger()
    if _HANDLER_NAME not in [h.get_name() for h in root_logger.handlers]:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


_structlog_configured = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Returns a structlog logger for the given name.

    The first call installs a JSON renderer on top of the standard library's
    logging system, unless structlog has already been configured elsewhere.
    Levels are left alone, so with a default root logger only warnings and
    above are shown; the info-level pipeline run events appear once the
    ``reeks`` logger is lowered, e.g. with `set_level("info")` or a
    ``logging.level`` entry in a pipeline config file.
    """
    global _structlog_configured
    if not _structlog_configured:
        _configure_structlog()
        _structlog_configured = True
    return structlog.get_logger(name)


def set_level(level) -> None:
    """Sets the level of the ``reeks`` logger hierarchy."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.getLogger("reeks").setLevel(level)
