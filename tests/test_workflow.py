"""
Tests for the console sign-in workflow.
"""

import io
import pytest
from unittest.mock import MagicMock, patch
from botocore.exceptions import ClientError

from awsconsole.aws.credentials import CredentialService
from awsconsole.aws.types import Credentials, Identity
from awsconsole.errors import (
    AWSServiceError,
    BrowserError,
    CredentialsError,
    FederationError,
    SSOLoginError,
)
from awsconsole.workflow import run_workflow

ARN = "arn:aws:sts::123456789012:assumed-role/Admin/alice"
SESSION_CREDS = Credentials("ASIA_EXAMPLE", "secret", "token")
LONG_LIVED_CREDS = Credentials("AKIA_EXAMPLE", "secret", "")
TEMP_CREDS = Credentials("ASIA_TEMP", "temp-secret", "temp-token")
LOGIN_URL = "https://signin.aws.amazon.com/federation?Action=login&SigninToken=tok"

class WorkflowState:
    """Collaborators and captured output for a single workflow run."""

    def __init__(self):
        self.service = MagicMock()
        self.service.get_caller_identity.return_value = Identity(ARN)
        self.service.retrieve_credentials.return_value = SESSION_CREDS
        self.service.get_session_token.return_value = TEMP_CREDS
        self.federation = MagicMock()
        self.federation.build_console_url.return_value = LOGIN_URL
        self.login = MagicMock(return_value=(True, "SSO login successful"))
        self.opener = MagicMock()
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def run(self, profile="test-profile", **kwargs):
        return run_workflow(
            profile,
            service=self.service,
            federation=self.federation,
            login=self.login,
            opener=self.opener,
            session_duration=3600,
            stdout=self.stdout,
            stderr=self.stderr,
            **kwargs
        )

@pytest.fixture
def state():
    return WorkflowState()

def test_happy_path_with_existing_session_token(state):
    """Test credentials that already carry a session token go straight to federation."""
    url = state.run()

    assert url == LOGIN_URL
    state.login.assert_not_called()
    state.service.get_session_token.assert_not_called()
    state.federation.build_console_url.assert_called_once_with(SESSION_CREDS, 3600)
    state.opener.assert_called_once_with(LOGIN_URL)
    assert state.stdout.getvalue() == (
        f"Authenticated as: {ARN}\n"
        "Opening AWS Console in your browser...\n"
    )
    assert state.stderr.getvalue() == ""

def test_falls_back_to_sso_and_requests_session_token(state):
    """Test SSO login on invalid credentials and upgrade of long-lived keys."""
    state.service.get_caller_identity.side_effect = [
        AWSServiceError("expired"),
        Identity(ARN),
    ]
    state.service.retrieve_credentials.return_value = LONG_LIVED_CREDS

    state.run()

    state.login.assert_called_once_with("test-profile")
    assert state.service.get_caller_identity.call_count == 2
    state.service.get_session_token.assert_called_once_with("test-profile", 3600)
    state.federation.build_console_url.assert_called_once_with(TEMP_CREDS, 3600)
    state.opener.assert_called_once_with(LOGIN_URL)
    assert "Credentials are not valid, attempting SSO login..." in state.stderr.getvalue()
    assert "No session token found, requesting temporary credentials..." in state.stdout.getvalue()

def test_default_profile_passed_through(state):
    """Test a None profile reaches every collaborator unchanged."""
    state.service.get_caller_identity.side_effect = [AWSServiceError("expired"), Identity(ARN)]

    state.run(profile=None)

    state.login.assert_called_once_with(None)
    state.service.retrieve_credentials.assert_called_once_with(None)

def test_returns_login_error(state):
    """Test a failed SSO login stops the workflow."""
    state.service.get_caller_identity.side_effect = AWSServiceError("expired")
    state.login.return_value = (False, "sso failed")

    with pytest.raises(SSOLoginError, match="SSO login failed: sso failed"):
        state.run()

    assert state.service.get_caller_identity.call_count == 1
    state.service.retrieve_credentials.assert_not_called()

def test_returns_error_when_credentials_remain_invalid_after_sso(state):
    """Test identity is only retried once after login."""
    state.service.get_caller_identity.side_effect = AWSServiceError("still invalid")

    with pytest.raises(CredentialsError, match="credentials still invalid after SSO login: still invalid"):
        state.run()

    state.login.assert_called_once()
    assert state.service.get_caller_identity.call_count == 2
    state.opener.assert_not_called()

def test_returns_error_when_retrieving_credentials_fails(state):
    state.service.retrieve_credentials.side_effect = AWSServiceError("retrieve failed")

    with pytest.raises(CredentialsError, match="failed to retrieve credentials: retrieve failed"):
        state.run()

    state.federation.build_console_url.assert_not_called()

def test_returns_error_when_session_token_request_fails(state):
    state.service.retrieve_credentials.return_value = LONG_LIVED_CREDS
    state.service.get_session_token.side_effect = AWSServiceError("token request failed")

    with pytest.raises(CredentialsError, match="failed to get temporary credentials: token request failed"):
        state.run()

    state.federation.build_console_url.assert_not_called()

def test_returns_error_when_federation_url_build_fails(state):
    state.federation.build_console_url.side_effect = FederationError("federation failed")

    with pytest.raises(FederationError, match="failed to build console URL: federation failed"):
        state.run()

    state.opener.assert_not_called()

def test_returns_error_when_browser_open_fails(state):
    """Test browser errors propagate unchanged."""
    state.opener.side_effect = BrowserError("open failed")

    with pytest.raises(BrowserError, match="^open failed$"):
        state.run()

def test_announce_disabled(state):
    """Test the browser message can be suppressed."""
    state.run(announce=False)

    assert "Opening AWS Console" not in state.stdout.getvalue()
    state.opener.assert_called_once_with(LOGIN_URL)

def test_role_assumption_failure_reported_as_retrieval_error(state):
    """Test a rejected AssumeRole during credential resolution stops the workflow cleanly."""
    with patch('awsconsole.aws.credentials.boto3.Session') as mock_cls:
        mock_cls.return_value.get_credentials.return_value.get_frozen_credentials.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "AssumeRole",
        )
        state.service.retrieve_credentials.side_effect = CredentialService().retrieve_credentials

        with pytest.raises(CredentialsError, match="failed to retrieve credentials: .*denied"):
            state.run(profile="deploy")

    state.federation.build_console_url.assert_not_called()
