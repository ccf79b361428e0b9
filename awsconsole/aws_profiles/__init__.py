"""
AWS Profile Management utilities for resolving profiles and refreshing
SSO credentials.
"""

from .profile_manager import (
    list_profiles,
    get_current_profile,
    resolve_profile,
    refresh_sso_credentials,
    ProfileInfo
)

__all__ = [
    'list_profiles',
    'get_current_profile',
    'resolve_profile',
    'refresh_sso_credentials',
    'ProfileInfo',
]
