from __future__ import annotations

import logging.config

import structlog
from beartype import beartype


class ModuleFilter(logging.Filter):
    """Pass ``service_name`` records from ``level`` up and every other record from ``others_level`` up."""

    def __init__(self, service_name: str, level: str, others_level: str = "INFO") -> None:
        super().__init__()
        levels = logging.getLevelNamesMapping()
        self.service_name = service_name
        self.level: int = levels.get(level.upper(), logging.INFO)
        self.others_level: int = levels.get(others_level.upper(), logging.INFO)

    def filter(self, record: logging.LogRecord) -> bool:
        own = record.name == self.service_name or record.name.startswith(f"{self.service_name}.")
        return record.levelno >= (self.level if own else self.others_level)


timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")
pre_chain = [
    # Records from stdlib loggers get the same level and timestamp keys
    structlog.stdlib.add_log_level,
    structlog.stdlib.ExtraAdder(),
    timestamper,
]


@beartype
def configure(
    service_name: str = "approximately",
    log_level: str = "INFO",
    colors: bool = True,
) -> None:
    """
    Configure the structlog-based logger.

    Args:
        service_name: Logger name prefix that is allowed down to ``log_level``;
            every other logger is capped at INFO.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        colors: Render console output with ANSI colors.
    """
    log_level = log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "module_filter": {
                    "()": ModuleFilter,
                    "service_name": service_name,
                    "level": log_level,
                },
            },
            "formatters": {
                "console": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        structlog.dev.ConsoleRenderer(colors=colors),
                    ],
                    "foreign_pre_chain": pre_chain,
                },
            },
            "handlers": {
                "default": {
                    "level": log_level,
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "filters": ["module_filter"],
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": log_level,
                    "propagate": True,
                },
            },
        }
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(service_name).debug("logger initialized")


logger: structlog.stdlib.BoundLogger = structlog.get_logger("approximately")
