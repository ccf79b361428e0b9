"""
aws-console: open the AWS Management Console using your current credentials.
"""

__version__ = "0.1.0"
