"""
Logging setup and the controller decorator that records server errors.
"""
import sys
import logging
import os

from ..http import HttpRequest, HttpResponse
from ..protocols import Controller, LogErrorRepository

logger = logging.getLogger(__name__)


def configure_logging(log_dir: str, level: str = "INFO") -> None:
    """Log to stdout, and to ``<log_dir>/guardian_service.log`` when the directory is writable."""
    handlers = [logging.StreamHandler(sys.stdout)]

    # Try to add file handler, but continue without it if directory creation fails
    try:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, "guardian_service.log")))
    except OSError as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s:%(message)s",
        handlers=handlers
    )


class LoggerControllerDecorator:
    """
    Wraps a controller and persists the stack of every 500 response.

    Args:
        controller: The decorated controller
        log_error_repository: Where the stacks are stored
    """

    def __init__(self, controller: Controller, log_error_repository: LogErrorRepository):
        self.controller = controller
        self.log_error_repository = log_error_repository

    def handle(self, request: HttpRequest) -> HttpResponse:
        response = self.controller.handle(request)
        if response.status_code == 500:
            stack = getattr(response.body, "stack", None) or str(response.body)
            logger.error(
                "SERVER_ERROR controller=%s\n%s",
                type(self.controller).__name__, stack
            )
            self.log_error_repository.log_error(stack)
        return response
