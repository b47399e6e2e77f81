"""Process entrypoint that serves the API with uvicorn."""

import errno
import logging
import socket

import uvicorn

from exercise_tracker.api.app import create_app
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import Settings
from exercise_tracker.containers import build_container

logger = logging.getLogger(__name__)


def is_port_free(host: str, port: int) -> bool:
    """Return True when a TCP socket can be bound on host:port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as exc:
            if exc.errno == errno.EADDRINUSE:
                return False
            raise
    return True


def resolve_port(host: str, port: int) -> int:
    """Return the configured port, or the next one if it is already bound."""
    if is_port_free(host, port):
        return port
    fallback = port + 1
    logger.warning("Port %s in use - trying %s", port, fallback)
    if not is_port_free(host, fallback):
        raise OSError(errno.EADDRINUSE, f"Ports {port} and {fallback} are in use")
    return fallback


def main(settings: Settings | None = None) -> None:
    """Build the app and serve it until interrupted."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    app = create_app(build_container(resolved_settings))
    port = resolve_port(resolved_settings.host, resolved_settings.port)
    logger.info("Server listening on port %s", port)
    uvicorn.run(
        app,
        host=resolved_settings.host,
        port=port,
        log_level=resolved_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
