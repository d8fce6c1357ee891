"""Structured logging for modgraph: structlog rendered through stdlib logging on stderr."""

from __future__ import annotations

import logging.config

import structlog

from modgraph.config import Settings, load_settings


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(settings: Settings | None = None, *, verbose: bool = False) -> None:
    """Configure structlog from *settings* (environment when omitted).

    stdout carries only the rendered graph, so every record goes to stderr.
    ``verbose`` forces DEBUG regardless of ``MODGRAPH_LOG_LEVEL``.
    """
    settings = settings or load_settings()
    level = "DEBUG" if verbose else settings.log_level

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.format_exc_info,
    ]
    if settings.log_format == "json":
        pre_chain.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "modgraph": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(settings.log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "modgraph",
                },
            },
            "loggers": {
                "modgraph": {
                    "handlers": ["stderr"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
