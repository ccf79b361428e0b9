"""
Console Login Workflow

Validates the caller's identity (falling back to `aws sso login` once),
makes sure the credentials carry a session token, exchanges them for a
console sign-in URL and opens it.
"""

import sys
from typing import Callable, Optional, TextIO, Tuple

from .aws.credentials import CredentialService
from .aws.federation import FederationClient
from .aws_profiles.profile_manager import refresh_sso_credentials
from .config import SESSION_DURATION
from .errors import AWSServiceError, CredentialsError, FederationError, SSOLoginError
from .utils.browser import open_browser

__all__ = ['run_workflow']


def run_workflow(profile: Optional[str],
                 service: Optional[CredentialService] = None,
                 federation: Optional[FederationClient] = None,
                 login: Optional[Callable[[Optional[str]], Tuple[bool, str]]] = None,
                 opener: Optional[Callable[[str], None]] = None,
                 session_duration: int = SESSION_DURATION,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None,
                 announce: bool = True) -> str:
    """
    Sign in to the AWS Console with the credentials of a profile.

    Args:
        profile: AWS profile name or None for the default credential chain
        service: Identity/credential provider
        federation: Federation endpoint client
        login: Interactive re-authentication, returns (success, message)
        opener: Called with the sign-in URL
        session_duration: Console and temporary credential lifetime in seconds
        stdout: Stream for progress messages
        stderr: Stream for warnings
        announce: Print the "Opening AWS Console" line before calling the opener

    Returns:
        str: The sign-in URL that was handed to the opener
    """
    service = service or CredentialService()
    federation = federation or FederationClient()
    login = login or refresh_sso_credentials
    opener = opener or open_browser
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        identity = service.get_caller_identity(profile)
    except AWSServiceError:
        print("Credentials are not valid, attempting SSO login...", file=stderr)
        success, message = login(profile)
        if not success:
            raise SSOLoginError(f"SSO login failed: {message}")

        try:
            identity = service.get_caller_identity(profile)
        except AWSServiceError as e:
            raise CredentialsError(f"credentials still invalid after SSO login: {e}") from e

    print(f"Authenticated as: {identity.arn}", file=stdout)

    try:
        creds = service.retrieve_credentials(profile)
    except AWSServiceError as e:
        raise CredentialsError(f"failed to retrieve credentials: {e}") from e

    # Long-lived IAM user keys have no session token, the federation
    # endpoint only accepts temporary credentials.
    if not creds.has_session_token:
        print("No session token found, requesting temporary credentials...", file=stdout)
        try:
            creds = service.get_session_token(profile, session_duration)
        except AWSServiceError as e:
            raise CredentialsError(f"failed to get temporary credentials: {e}") from e

    try:
        login_url = federation.build_console_url(creds, session_duration)
    except FederationError as e:
        raise FederationError(f"failed to build console URL: {e}") from e

    if announce:
        print("Opening AWS Console in your browser...", file=stdout)
    opener(login_url)
    return login_url
