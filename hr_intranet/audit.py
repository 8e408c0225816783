"""Security event logging.

Denials and rejections go to the ``hr_intranet.security`` logger with a
``[SECURITY]`` prefix so they can be filtered apart from the access log.
"""

import logging
import sys
import traceback

from fastapi import Request

security_logger = logging.getLogger("hr_intranet.security")


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def log_safely(logger: logging.Logger, level: int, message: str) -> None:
    """Log ``message``; a failing handler never propagates into the request."""
    try:
        logger.log(level, message)
    except Exception:
        # Same contract as logging.Handler.handleError
        if logging.raiseExceptions:
            traceback.print_exc(file=sys.stderr)


def security_event(message: str, request: Request | None = None) -> None:
    if request is not None:
        message = f"{message} (IP: {client_address(request)})"
    log_safely(security_logger, logging.WARNING, f"[SECURITY] {message}")
