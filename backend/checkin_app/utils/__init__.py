"""Utility modules for the application."""
from checkin_app.utils.logger import logger, safe_print, safe_repr

__all__ = [
    'logger',
    'safe_print',
    'safe_repr'
]
