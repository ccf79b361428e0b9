"""
Flat records passed between the credential workflow steps.
"""

from typing import Optional


class Identity:
    """Captures the principal that authenticated with STS."""
    def __init__(self, arn: str, account: Optional[str] = None, user_id: Optional[str] = None):
        self.arn = arn
        self.account = account
        self.user_id = user_id

    def __str__(self) -> str:
        return self.arn


class Credentials:
    """Temporary or long-lived AWS credentials."""
    def __init__(self, access_key_id: str, secret_access_key: str, session_token: Optional[str] = ""):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token or ""

    @property
    def has_session_token(self) -> bool:
        return bool(self.session_token)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return (self.access_key_id, self.secret_access_key, self.session_token) == (
            other.access_key_id, other.secret_access_key, other.session_token
        )

    def __repr__(self) -> str:
        # Never print secrets
        token = "set" if self.has_session_token else "none"
        return f"Credentials(access_key_id={self.access_key_id!r}, session_token={token})"
