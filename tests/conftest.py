"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys

# Add the parent directory to the path so we can import the awsconsole package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

@pytest.fixture(autouse=True)
def clean_aws_env(monkeypatch, tmp_path):
    """Keep the developer's own AWS profile and config files out of the tests."""
    for var in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))

@pytest.fixture
def aws_files(tmp_path):
    """Write AWS config and credentials files for a test."""
    def write(config: str = "", credentials: str = ""):
        (tmp_path / "aws_config").write_text(config)
        (tmp_path / "aws_credentials").write_text(credentials)
    return write
