#!/usr/bin/env python3
"""
AWS Console CLI

Opens the AWS Management Console in your default browser using the
credentials of the current (or given) AWS profile. Equivalent to the
installed `aws-console` command, usable straight from a checkout.
"""

import sys
from pathlib import Path

# Add the parent directory to sys.path to import from awsconsole
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from awsconsole.cli import main

if __name__ == "__main__":
    sys.exit(main())
