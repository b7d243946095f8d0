"""Structured logging setup.

Uses structlog on top of stdlib logging, rendering either JSON or colored
console output.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from trade_journal.config import LogFormat, get_settings


def setup_logging() -> None:
    """Configure structlog from the current settings."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == LogFormat.JSON:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structured logger.

    Args:
        name: Logger name. Defaults to the calling module.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def log_calculation(
    logger: structlog.stdlib.BoundLogger,
    *,
    symbol: str,
    direction: str,
    position_size: float,
    risk_amount: float,
    complete: bool,
    **kwargs: Any,
) -> None:
    """Log one calculator run."""
    logger.debug(
        "position_calculated",
        symbol=symbol,
        direction=direction,
        position_size=round(position_size, 6),
        risk_amount=round(risk_amount, 2),
        complete=complete,
        **kwargs,
    )


def log_trade_saved(
    logger: structlog.stdlib.BoundLogger,
    *,
    symbol: str,
    direction: str,
    lot_size: float,
    risk_amount: float,
    status: str = "PLANNED",
    **kwargs: Any,
) -> None:
    """Log a trade written to the journal."""
    logger.info(
        "trade_saved",
        symbol=symbol,
        direction=direction,
        lot_size=lot_size,
        risk_amount=risk_amount,
        status=status,
        **kwargs,
    )
