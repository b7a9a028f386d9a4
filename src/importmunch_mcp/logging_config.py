"""structlog setup shared by the CLI and the MCP server."""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Route structured logs to stderr.

    stdout carries scan output (CLI) or the MCP stdio stream (server),
    so nothing may log there.
    """
    level = logging.INFO if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
