"""Package diagnostics over structlog.

logsink reports its own configuration changes (sink transitions, channel
setup) through get_logger() at DEBUG.  Nothing is logged from the write path.

setup_logging(config) configures structlog's stdlib bridge, renders records
as console text or JSON (LOGSINK_LOG_FORMAT) and attaches one handler to the
root logger.  The handler depends on LOGSINK_LOG_DESTINATION:

    stderr : logging.StreamHandler on sys.stderr (default)
    file   : logging.FileHandler appending to LOGSINK_LOG_PATH
    sink   : SinkHandler over a Logger built from the same LogSinkConfig

Routing stdlib logging into any Logger:
    handler = SinkHandler(my_logger)
    logging.getLogger().addHandler(handler)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from logsink.config import LogSinkConfig
    from logsink.logger import Logger

DESTINATIONS = ("stderr", "file", "sink")


class SinkHandler(logging.Handler):
    """logging.Handler that delivers formatted records through a Logger.

    Each record becomes one write() of the formatted text plus a newline.
    The Logger is borrowed: switching its sink later redirects this handler
    too.
    """

    terminator = "\n"

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink_logger = logger

    @property
    def sink_logger(self) -> Logger:
        return self._sink_logger

    def emit(self, record: logging.LogRecord) -> None:
        if not self._sink_logger.is_active():
            return
        try:
            self._sink_logger.write(self.format(record) + self.terminator)
        except Exception:
            self.handleError(record)


def build_formatter(config: LogSinkConfig) -> logging.Formatter:
    """Configure structlog for the stdlib bridge and return its formatter."""
    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def create_handler(config: LogSinkConfig) -> logging.Handler:
    """Build the unformatted handler named by config.log_destination."""
    destination = config.log_destination
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "file":
        if not config.log_path:
            raise ValueError("log destination 'file' requires log_path (LOGSINK_LOG_PATH)")
        path = Path(config.log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(str(path), mode="a", encoding="utf-8")
    if destination == "sink":
        from logsink.logger import Logger

        return SinkHandler(Logger.from_config(config))
    raise ValueError(
        f"Unknown log destination: {destination!r}. Available: {list(DESTINATIONS)}."
    )


# ---------------------------------------------------------------------------
# Module state
# ---------------------------------------------------------------------------

_active_handler: logging.Handler | None = None


def _detach_managed() -> None:
    root_logger = logging.getLogger()
    root_logger.handlers = [
        h for h in root_logger.handlers
        if not getattr(h, "_logsink_managed", False)
    ]


def setup_logging(config: LogSinkConfig | None = None) -> logging.Handler:
    """Wire structlog diagnostics to the root logger.

    Only the handler installed by a previous setup_logging() call is
    replaced; handlers added by anyone else are left alone.  Returns the
    installed handler.
    """
    global _active_handler

    if config is None:
        from logsink.config import LogSinkConfig

        config = LogSinkConfig()

    handler = create_handler(config)
    handler.setFormatter(build_formatter(config))
    handler._logsink_managed = True  # type: ignore[attr-defined]

    if _active_handler is not None:
        _active_handler.close()
    _detach_managed()
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))

    _active_handler = handler
    return handler


def get_logger(name: str = "", **kwargs: Any) -> Any:
    """Get a structlog logger that accepts key=value kwargs.

    Before setup_logging() the logger wraps the stdlib logger of the same
    name and renders key=value text, so it honors stdlib levels and handlers
    without touching structlog's global configuration.
    """
    if _active_handler is not None:
        return structlog.get_logger(name, **kwargs)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        **kwargs,
    )


def shutdown_logging() -> None:
    """Detach and close the managed handler."""
    global _active_handler

    _detach_managed()
    if _active_handler is not None:
        _active_handler.close()
    _active_handler = None
