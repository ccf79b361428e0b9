"""
AWS Profile Manager

Resolves which AWS profile to use, lists the profiles configured on the
system and runs the interactive `aws sso login` flow when a profile's
credentials have expired.
"""

import os
import configparser
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

__all__ = [
    'list_profiles',
    'get_current_profile',
    'resolve_profile',
    'refresh_sso_credentials',
    'ProfileInfo'
]

class ProfileInfo:
    """Contains information about an AWS profile."""
    def __init__(self, name: str, region: Optional[str] = None,
                 is_sso: bool = False, is_default: bool = False,
                 is_active: bool = False, auth_method: Optional[str] = None):
        self.name = name
        self.region = region
        self.is_sso = is_sso
        self.is_default = is_default
        self.is_active = is_active
        self.auth_method = auth_method  # "api_key", "sso", "role", "external"

    def __str__(self) -> str:
        """Return string representation of the profile info."""
        status = []
        if self.is_active:
            status.append("ACTIVE")
        if self.is_default:
            status.append("DEFAULT")
        if self.is_sso:
            status.append("SSO")

        status_str = f" ({', '.join(status)})" if status else ""
        region_str = f" - {self.region}" if self.region else ""
        auth_str = f" [{self.auth_method}]" if self.auth_method else ""

        return f"{self.name}{region_str}{auth_str}{status_str}"

def _get_aws_config_path() -> Path:
    """Get the path to the AWS config file."""
    override = os.environ.get("AWS_CONFIG_FILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aws" / "config"

def _get_aws_credentials_path() -> Path:
    """Get the path to the AWS credentials file."""
    override = os.environ.get("AWS_SHARED_CREDENTIALS_FILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aws" / "credentials"

def _read_ini(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path)
    return parser

def _credentials_auth_method(creds: configparser.ConfigParser, name: str) -> Optional[str]:
    if name not in creds:
        return None
    if creds.has_option(name, "aws_access_key_id"):
        return "api_key"
    if creds.has_option(name, "credential_process"):
        return "external"
    return None

def list_profiles() -> List[ProfileInfo]:
    """
    List all AWS profiles configured on the system.

    Only the shared config and credentials files are read, no AWS calls
    are made.

    Returns:
        List of ProfileInfo objects representing each AWS profile
    """
    profiles = []
    current_profile = get_current_profile()
    config = _read_ini(_get_aws_config_path())
    creds = _read_ini(_get_aws_credentials_path())

    for section in config.sections():
        if section == "default":
            name = "default"
        elif section.startswith("profile "):
            name = section[8:]  # Remove "profile " prefix
        elif section.startswith("sso-session") or section.startswith("services"):
            continue
        else:
            name = section

        is_sso = (config.has_option(section, "sso_start_url") or
                  config.has_option(section, "sso_session"))

        if is_sso:
            auth_method = "sso"
        elif config.has_option(section, "role_arn"):
            auth_method = "role"
        elif config.has_option(section, "credential_process"):
            auth_method = "external"
        else:
            auth_method = _credentials_auth_method(creds, name)

        profiles.append(ProfileInfo(
            name=name,
            region=config.get(section, "region", fallback=None),
            is_sso=is_sso,
            is_default=(name == "default"),
            is_active=(current_profile == name),
            auth_method=auth_method
        ))

    # Profiles that only exist in the credentials file
    for section in creds.sections():
        if any(p.name == section for p in profiles):
            continue

        profiles.append(ProfileInfo(
            name=section,
            is_default=(section == "default"),
            is_active=(current_profile == section),
            auth_method=_credentials_auth_method(creds, section)
        ))

    return profiles

def get_current_profile() -> Optional[str]:
    """
    Get the name of the currently active AWS profile.

    Returns:
        Name of the active profile or None if using default credentials
    """
    profile = os.environ.get("AWS_PROFILE")
    if profile:
        return profile

    profile = os.environ.get("AWS_DEFAULT_PROFILE")
    if profile:
        return profile

    return None

def resolve_profile(explicit: Optional[str] = None) -> Optional[str]:
    """
    Pick the profile to authenticate with.

    Args:
        explicit: Profile given on the command line, if any

    Returns:
        The explicit profile, else the environment's, else None
    """
    if explicit:
        return explicit
    return get_current_profile()

def refresh_sso_credentials(profile_name: Optional[str] = None) -> Tuple[bool, str]:
    """
    Refresh SSO credentials for a profile.

    The AWS CLI is run attached to the current terminal so the user can
    follow the device authorization prompt.

    Args:
        profile_name: Name of the SSO profile to refresh (None for default)

    Returns:
        Tuple of (success, message)
    """
    cmd = ["aws", "sso", "login"]
    if profile_name:
        cmd.extend(["--profile", profile_name])

    try:
        result = subprocess.run(cmd)
    except FileNotFoundError:
        return False, "AWS CLI not found, please install it first"
    except OSError as e:
        return False, str(e)

    if result.returncode == 0:
        return True, "SSO login successful"
    return False, f"aws sso login exited with status {result.returncode}"
