"""
Exceptions raised while resolving credentials and opening the console.
"""


class ConsoleLoginError(Exception):
    """Base class for every failure the CLI reports to the user."""


class AWSServiceError(ConsoleLoginError):
    """An STS call or credential lookup failed."""


class CredentialsError(ConsoleLoginError):
    """Credentials could not be validated, retrieved or upgraded."""


class SSOLoginError(ConsoleLoginError):
    """The interactive `aws sso login` flow failed."""


class FederationError(ConsoleLoginError):
    """The federation endpoint did not hand back a sign-in token."""


class BrowserError(ConsoleLoginError):
    """The sign-in URL could not be opened."""
