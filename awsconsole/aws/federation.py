"""
Federation Client

Calls the AWS federation endpoint to turn a set of temporary credentials
into a single-use console sign-in URL.
"""

import json
from typing import Optional
from urllib.parse import urlencode

import requests

from ..config import CONSOLE_URL, FEDERATION_ISSUER, FEDERATION_TIMEOUT, FEDERATION_URL
from ..errors import FederationError
from .types import Credentials

__all__ = ['FederationClient']


class FederationClient:
    """
    Builds federated console login URLs.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 federation_url: str = FEDERATION_URL,
                 console_url: str = CONSOLE_URL,
                 timeout: float = FEDERATION_TIMEOUT):
        """
        Initialize the federation client.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            federation_url: Federation endpoint
            console_url: Console page the sign-in URL lands on
            timeout: Request timeout in seconds
        """
        self.session = session or requests.Session()
        self.federation_url = federation_url
        self.console_url = console_url
        self.timeout = timeout

    def _request_signin_token(self, credentials: Credentials, duration_seconds: int) -> str:
        session_json = json.dumps({
            "sessionId": credentials.access_key_id,
            "sessionKey": credentials.secret_access_key,
            "sessionToken": credentials.session_token,
        })
        params = {
            "Action": "getSigninToken",
            "SessionDuration": str(duration_seconds),
            "Session": session_json,
        }

        try:
            response = self.session.get(self.federation_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FederationError(f"failed to request signin token: {e}") from e

        if response.status_code != 200:
            raise FederationError(
                f"federation endpoint returned HTTP {response.status_code}: {response.text}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise FederationError(f"failed to parse signin token response: {e}") from e

        token = body.get("SigninToken") if isinstance(body, dict) else None
        if not token:
            raise FederationError("received empty signin token from federation endpoint")
        return token

    def build_console_url(self, credentials: Credentials, duration_seconds: int) -> str:
        """
        Build a one-time console sign-in URL.

        Args:
            credentials: Credentials carrying a session token
            duration_seconds: Console session lifetime

        Returns:
            str: URL that signs the browser into the console
        """
        token = self._request_signin_token(credentials, duration_seconds)
        query = urlencode({
            "Action": "login",
            "Issuer": FEDERATION_ISSUER,
            "Destination": self.console_url,
            "SigninToken": token,
        })
        return f"{self.federation_url}?{query}"
