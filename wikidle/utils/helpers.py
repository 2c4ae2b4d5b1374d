"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

PLAYER_HEADER = 'X-Player-Id'


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract caller identity from a request, if there is one."""
    if request_obj is None:
        return {'user_ip': None, 'player_id': None}

    headers = getattr(request_obj, 'headers', None) or {}
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'player_id': headers.get(PLAYER_HEADER)
    }
