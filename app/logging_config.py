import logging
import re
import sys
from typing import Optional

from app.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Mask values of password/token/secret fields in log messages."""

    def __init__(self, sensitive_keys=None):
        super().__init__()
        keys = sensitive_keys or ["password", "token", "secret", "api_key"]
        self.pattern = re.compile(
            r"(?P<key>(%s)['\"]?\s*[:=]\s*['\"]?)[^'\",\s}]+" % "|".join(keys),
            re.IGNORECASE,
        )

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = self.pattern.sub(r"\g<key>****", record.msg)
        return True


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the 'app' logger once; later calls only adjust the level."""
    logger = logging.getLogger("app")
    logger.setLevel(level or get_log_level())

    if not any(getattr(h, "_praetorian", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(SensitiveDataFilter())
        handler._praetorian = True
        logger.addHandler(handler)

    return logger
