"""
AWS identity, credential and federation helpers.
"""

from .types import Identity, Credentials
from .credentials import CredentialService
from .federation import FederationClient

__all__ = [
    'Identity',
    'Credentials',
    'CredentialService',
    'FederationClient',
]
