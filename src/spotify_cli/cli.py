#!/usr/bin/env python3
"""
Command-line interface for spotify-cli.
"""

import argparse
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spotify-cli",
        description="spotify-cli - Browse and play your saved Spotify albums",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Add global options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Use generated offline data instead of the Spotify API",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the log level from config.toml",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")
    subparsers.add_parser("auth", help="Authenticate with Spotify and store tokens")

    return parser


def main() -> None:
    """Main entry point for the spotify-cli command."""
    args = build_parser().parse_args()

    if args.subcommand == "auth":
        from .main import run_auth

        sys.exit(run_auth(args.log_level))

    # No subcommand - start interactive mode
    from .main import interactive_mode

    interactive_mode(debug=args.debug, log_level=args.log_level)


if __name__ == "__main__":
    main()
