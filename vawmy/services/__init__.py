"""
Services Package

Exports all services for easy importing.
"""

from vawmy.services.slug import slugify
from vawmy.services.auth_gate import (AuthGate, AuthState, current_admin_token, current_gate,
                                      decode_token, encode_token)
from vawmy.services.api_client import ApiClient
from vawmy.services.uploads import selected_files, upload_all, validate_upload

__all__ = [
    'slugify',
    'AuthGate',
    'AuthState',
    'current_admin_token',
    'current_gate',
    'decode_token',
    'encode_token',
    'ApiClient',
    'selected_files',
    'upload_all',
    'validate_upload'
]
