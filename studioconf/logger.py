import logging
from typing import Any

import structlog
from structlog.types import Processor


def configure_structlog():
    """
    Route structlog events into stdlib ``logging`` as plain records.

    Leaves an existing structlog configuration and the root logger alone, so
    importing the package never changes how the host application logs.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Install a structlog-rendering handler on the root logger"""
    configure_structlog()

    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    log_renderer: structlog.types.Processor
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    # studioconf events arrive as stdlib records, so they take the foreign chain too
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class StudioConfStructLogger:
    """
    Structured logger for the studioconf package.

    Values bound with ``bind`` stay attached to the returned logger only, so
    a registry and its validator each carry their own ``component`` key.
    """

    def __init__(self, log_name: str = "studioconf", _bound=None):
        self.log_name = log_name
        self.logger = _bound if _bound is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "StudioConfStructLogger":
        """Return a child logger with extra context."""
        return StudioConfStructLogger(self.log_name, self.logger.bind(**new_values))

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)


def get_studioconf_logger(log_name: str = "studioconf") -> StudioConfStructLogger:
    """Return a structured logger under the studioconf namespace."""
    return StudioConfStructLogger(log_name)


def init_logger(config):
    """
    Initialize console or JSON logging for an application using studioconf.

    Not called on import: the root logger belongs to the application.

    Args:
        config: LoggingConfig with the logging settings

    Returns:
        StudioConfStructLogger: Configured structured logger instance
    """
    setup_logging(json_logs=config.json_logs, log_level=config.global_level)

    for component, level in config.component_levels.items():
        logging.getLogger(component).setLevel(level.upper())

    return StudioConfStructLogger("studioconf")
