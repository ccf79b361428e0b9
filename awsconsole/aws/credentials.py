"""
AWS Credential Service

Identity and credential operations against STS, built on boto3. A new
boto3 session is created for every call so that credentials refreshed by
`aws sso login` in the meantime are picked up.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import AWSServiceError
from .types import Credentials, Identity

__all__ = ['CredentialService']


class CredentialService:
    """
    Handles identity and credential lookups for an AWS profile.
    """

    def _load_session(self, profile: Optional[str]) -> boto3.Session:
        """
        Build a boto3 session for a profile.

        Args:
            profile: AWS profile name or None for the default credential chain

        Returns:
            boto3.Session: A fresh session
        """
        try:
            if profile:
                return boto3.Session(profile_name=profile)
            return boto3.Session()
        except BotoCoreError as e:
            raise AWSServiceError(f"failed to load AWS config: {e}") from e

    def get_caller_identity(self, profile: Optional[str] = None) -> Identity:
        """
        Ask STS who the current credentials belong to.

        Args:
            profile: AWS profile name or None for default

        Returns:
            Identity: The authenticated principal
        """
        session = self._load_session(profile)
        try:
            out = session.client("sts").get_caller_identity()
        except (BotoCoreError, ClientError) as e:
            raise AWSServiceError(str(e)) from e

        return Identity(
            arn=out.get("Arn", ""),
            account=out.get("Account"),
            user_id=out.get("UserId"),
        )

    def retrieve_credentials(self, profile: Optional[str] = None) -> Credentials:
        """
        Resolve the credentials the profile currently points at.

        Args:
            profile: AWS profile name or None for default

        Returns:
            Credentials: Resolved credentials, possibly without a session token
        """
        session = self._load_session(profile)
        try:
            creds = session.get_credentials()
            if creds is None:
                raise AWSServiceError("no AWS credentials found")
            frozen = creds.get_frozen_credentials()
        except (BotoCoreError, ClientError) as e:
            raise AWSServiceError(str(e)) from e

        return Credentials(
            access_key_id=frozen.access_key,
            secret_access_key=frozen.secret_key,
            session_token=frozen.token,
        )

    def get_session_token(self, profile: Optional[str], duration_seconds: int) -> Credentials:
        """
        Exchange long-lived credentials for temporary ones.

        Args:
            profile: AWS profile name or None for default
            duration_seconds: Lifetime of the temporary credentials

        Returns:
            Credentials: Temporary credentials including a session token
        """
        session = self._load_session(profile)
        try:
            out = session.client("sts").get_session_token(DurationSeconds=duration_seconds)
        except (BotoCoreError, ClientError) as e:
            raise AWSServiceError(str(e)) from e

        creds = out.get("Credentials")
        if not creds:
            raise AWSServiceError("STS GetSessionToken returned empty credentials")

        return Credentials(
            access_key_id=creds.get("AccessKeyId", ""),
            secret_access_key=creds.get("SecretAccessKey", ""),
            session_token=creds.get("SessionToken", ""),
        )
