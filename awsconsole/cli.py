"""
Command line entry point for aws-console.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .aws_profiles import list_profiles, resolve_profile
from .config import MIN_SESSION_DURATION, SESSION_DURATION
from .errors import ConsoleLoginError
from .workflow import run_workflow


def _duration(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid duration: {value!r}")
    if not MIN_SESSION_DURATION <= seconds <= SESSION_DURATION:
        raise argparse.ArgumentTypeError(
            f"duration must be between {MIN_SESSION_DURATION} and {SESSION_DURATION} seconds"
        )
    return seconds


def format_profile_list(profiles):
    """Format profiles for display."""
    if not profiles:
        return "No AWS profiles found."

    output = []
    for p in profiles:
        marker = "→ " if p.is_active else "  "
        output.append(f"{marker}{p}")

    return "\n".join(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aws-console",
        description="Open the AWS Console in your browser using current credentials. "
                    "If credentials are expired or missing, 'aws sso login' is run to refresh them."
    )
    parser.add_argument("--profile", "-p",
                        help="AWS profile to use (defaults to AWS_PROFILE env var)")
    parser.add_argument("--duration", type=_duration, default=SESSION_DURATION,
                        help=f"Console session length in seconds (default: {SESSION_DURATION})")
    parser.add_argument("--print-url", action="store_true",
                        help="Print the sign-in URL instead of opening a browser")
    parser.add_argument("--list-profiles", action="store_true",
                        help="List configured AWS profiles and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def handle_list_profiles(args):
    """Handle the --list-profiles option."""
    print("AWS Profiles:")
    print(format_profile_list(list_profiles()))


def handle_open(args):
    """Run the console sign-in workflow."""
    profile = resolve_profile(args.profile)
    if args.print_url:
        # Keep stdout for the URL alone so it can be piped
        run_workflow(profile, opener=print, session_duration=args.duration,
                     stdout=sys.stderr, announce=False)
    else:
        run_workflow(profile, session_duration=args.duration)
        print("✅ AWS Console sign-in URL opened")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_profiles:
        handle_list_profiles(args)
        return 0

    try:
        handle_open(args)
    except ConsoleLoginError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
