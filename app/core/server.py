import socket
import uvicorn

from app.core.config import settings
from app.core.logger import logger

def is_port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True

def find_available_port(host: str, port: int, attempts: int) -> int:
    """
    Returns `port` if it can be bound, otherwise the first free one among the
    next `attempts` ports. Raises RuntimeError when none is free.
    """
    if is_port_free(host, port):
        return port

    logger.warning(f"⚠️ Port {port} is in use, attempting to find an available port.")
    for candidate in range(port + 1, port + 1 + attempts):
        if is_port_free(host, candidate):
            return candidate
        logger.warning(f"⚠️ Port {candidate} is in use, trying {candidate + 1}")

    raise RuntimeError(f"Could not find an available port after {attempts} attempts")

def run_server(app_path: str = "app.main:app"):
    try:
        port = find_available_port(settings.HOST, settings.PORT, settings.PORT_RETRY_ATTEMPTS)
    except RuntimeError as e:
        logger.critical(f"❌ {e}")
        raise SystemExit(1)

    logger.info(f"🚀 Serving on port {port}")
    uvicorn.run(app_path, host=settings.HOST, port=port, log_config=None)
