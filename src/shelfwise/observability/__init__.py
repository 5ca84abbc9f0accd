"""Logfire observability for the Shelfwise server."""

import logging

import logfire

from ..config import ServerConfig
from .decorators import trace_tool

logger = logging.getLogger(__name__)


def initialize_observability(config: ServerConfig) -> bool:
    """
    Configure Logfire from the server configuration.

    Returns:
        True if Logfire was configured, False if tracing is disabled
    """
    if not config.logfire_enabled:
        logger.debug("Observability disabled via configuration")
        return False

    logfire.configure(
        token=config.logfire_token,
        environment=config.environment,
        send_to_logfire=config.logfire_send,
        console=False,
    )
    logger.info("Logfire configured for environment %s", config.environment)
    return True


__all__ = [
    "initialize_observability",
    "trace_tool",
]
