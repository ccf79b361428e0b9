"""
Constants used when building console sign-in URLs.

Everything else (profiles, regions, credential sources) comes from the
standard AWS shared config files and environment, resolved by boto3.
"""

# 12 hours, the maximum the federation endpoint accepts
SESSION_DURATION = 43200
MIN_SESSION_DURATION = 900

FEDERATION_URL = "https://signin.aws.amazon.com/federation"
CONSOLE_URL = "https://console.aws.amazon.com/"
FEDERATION_ISSUER = "aws-console-cli"

# Seconds
FEDERATION_TIMEOUT = 15
