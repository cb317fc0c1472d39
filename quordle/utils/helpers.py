"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from flask import request

from ..config.app_config import Config
from ..models.game import Alphabet


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
        'username': getattr(request_obj, 'username', None)
    }


def parse_alphabet(value, default: str = Config.DEFAULT_ALPHABET) -> Optional[Alphabet]:
    """Alphabet from a request field ('en' / 'ko'), or None when the tag is unknown."""
    try:
        return Alphabet(value or default)
    except ValueError:
        return None
