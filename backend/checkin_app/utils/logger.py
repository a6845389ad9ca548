"""Safe logging utility that handles Unicode characters."""
import logging
import sys
from typing import Any

from checkin_app.core.config import settings

# Configure stdout/stderr for UTF-8 on Windows
if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    if hasattr(sys.stderr, 'reconfigure'):
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')


def _build_logger(name: str) -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL)
    return log


logger = _build_logger("checkin_app")


def _ascii(value: Any) -> Any:
    if isinstance(value, str):
        return value.encode('ascii', errors='replace').decode('ascii')
    if isinstance(value, dict):
        return {_ascii(k): _ascii(v) for k, v in value.items()}
    return value


def safe_print(*args, **kwargs):
    """
    Safe print function that handles Unicode characters.
    Falls back to an ASCII rendering when the console encoding cannot
    represent the output (e.g. Windows charmap).
    """
    try:
        print(*args, **kwargs)
    except (UnicodeEncodeError, UnicodeDecodeError):
        print(*[_ascii(arg) for arg in args], **kwargs)


def safe_repr(obj: Any) -> str:
    """
    Safe representation function that handles Unicode characters.
    """
    try:
        return repr(obj)
    except (UnicodeEncodeError, UnicodeDecodeError):
        return str(obj).encode('ascii', errors='replace').decode('ascii')
