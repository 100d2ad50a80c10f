#!/usr/bin/env python3
"""
Main application module for the Xtream channel lister.

This script fetches the live categories of an Xtream Codes IPTV provider,
optionally filters them by name, lists the channels of every matching
category and prints a summary. The report can also be saved locally and
uploaded to S3-compatible storage.
"""

import os
import sys
import argparse
import getpass
import logging
from typing import List, Optional

from .config import Config
from .exceptions import CategoryFetchError
from .export import save_report_locally, upload_report_to_s3
from .filters import FilterCriteria
from .pipeline import list_channels
from .report import ReportWriter
from .utils import SanitizedLogger, first_lines, register_secret


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = SanitizedLogger(logging.getLogger(__name__))

EPILOG = """\
Examples:
  # List all categories and their channels. Password will be prompted.
  %(prog)s -H http://myiptv.example.com:8000 -u myusername

  # Categories starting with "24/7" (case-insensitive).
  %(prog)s -H http://myiptv.example.com:8000 -u myusername -p mysecretpass -P "24/7"

  # Categories starting with "us" AND containing "news".
  %(prog)s -H http://myiptv.example.com:8000 -u myusername -p mysecretpass -P "us" -c "news"

  # Case-sensitive: categories starting with exactly "USA".
  %(prog)s -H http://myiptv.example.com:8000 -u myusername -p mysecretpass -P "USA" -s
"""


class ListerArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors"""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ListerArgumentParser(
        prog='xtream-channels',
        description="Fetches and displays live channels from an Xtream Codes IPTV provider. "
                    "Category filtering (-P and -c) is case-insensitive by default.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-H', '--host', help="The Xtream Codes panel URL (e.g., http://domain.com:port). Env: XTREAM_HOST")
    parser.add_argument('-u', '--username', help="Your IPTV username. Env: XTREAM_USERNAME")
    parser.add_argument('-p', '--password', help="Your IPTV password. If not provided, you will be prompted securely. Env: XTREAM_PASSWORD")
    parser.add_argument('-P', '--prefix', help="Only show categories where the name starts with this prefix.")
    parser.add_argument('-c', '--contains', help="Only show categories where the name contains this string. Can be combined with -P.")
    parser.add_argument('-s', '--sensitive', action='store_true',
                        help="Perform case-sensitive matching for -P (prefix) and -c (contains).")
    parser.add_argument('-t', '--timeout',
                        help=f"Connection timeout for API requests in seconds (default: {Config.DEFAULT_TIMEOUT}). Env: XTREAM_TIMEOUT")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable verbose output.")
    parser.add_argument('-o', '--report', dest='report_filename',
                        help="Also save the report under OUTPUT_DIR with this file name. Env: REPORT_FILENAME")
    parser.add_argument('--s3-key', dest='s3_report_key',
                        help="Upload the report to S3_BUCKET_NAME under this key. Env: S3_REPORT_KEY")
    parser.add_argument('--dry-run', action='store_true', help="Skip the S3 upload. Env: DRY_RUN")
    return parser


def prompt_for_password(config: Config) -> None:
    """Ask for the password on the terminal when it was not supplied"""
    if config.PASSWORD or not config.HOST or not config.USERNAME:
        return
    if not sys.stdin.isatty():
        return
    password = getpass.getpass(f"Enter IPTV password for user '{config.USERNAME}': ")
    if password:
        config.set_password(password)


def log_connection_details(config: Config) -> None:
    logger.info("Verbose mode enabled.")
    logger.info(f"Host: {config.HOST}")
    logger.info(f"API Path: {config.API_PATH}")
    logger.info(f"Full API Endpoint: {config.API_ENDPOINT}")
    logger.info(f"API Base URL (credentials part): {config.API_ENDPOINT}?username={config.USERNAME}&password=********")


def export_report(content: str, config: Config, dry_run: bool) -> None:
    """Save and upload the report as configured"""
    if config.REPORT_FILENAME:
        save_report_locally(content, config.REPORT_FILENAME, config)

    if config.S3_REPORT_KEY:
        if dry_run:
            logger.info("Dry-run mode: skipping S3 upload")
            return
        upload_report_to_s3(content, config)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to orchestrate fetching, filtering and listing.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(
        host=args.host,
        username=args.username,
        password=args.password,
        timeout=args.timeout,
        report_filename=args.report_filename,
        s3_report_key=args.s3_report_key,
    )

    prompt_for_password(config)
    register_secret(config.PASSWORD)

    # Validate configuration
    validation_errors = config.validate_config()
    if validation_errors:
        for error in validation_errors:
            logger.error(f"Configuration error: {error}")
        return 1

    if args.verbose:
        log_connection_details(config)

    criteria = FilterCriteria(prefix=args.prefix, contains=args.contains, case_sensitive=args.sensitive)
    dry_run = args.dry_run or os.environ.get('DRY_RUN', '').lower() in ('true', '1', 'yes', 'on')

    writer = ReportWriter()
    try:
        list_channels(config, criteria, writer, verbose=args.verbose)
    except CategoryFetchError as e:
        logger.error(f"Error: {e}")
        for line in e.diagnostics:
            logger.error(line)
        if e.body:
            logger.error("Server response (first 10 lines):")
            for line in first_lines(e.body):
                logger.error(line)
        return 1

    writer.line()
    writer.line("Done.")

    try:
        export_report(writer.getvalue(), config, dry_run)
    except Exception as e:
        logger.error(f"Report export failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
