import logging
import uuid
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at application start."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def generate_request_id(header_value: Optional[str] = None) -> str:
    """Reuse the caller's X-Request-ID when present, otherwise mint a new one."""
    if header_value:
        return header_value
    return str(uuid.uuid4())
