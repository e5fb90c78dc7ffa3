"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None, player_id: Optional[str] = None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    if player_id is None and request_obj.view_args:
        player_id = request_obj.view_args.get('player_id')

    return {
        'user_ip': user_ip,
        'player_id': player_id
    }
