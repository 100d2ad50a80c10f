"""
Channel listing pipeline.

Fetches the live categories, keeps those matching the filter and lists the
channels of each one in provider order. A failed categories request ends the
run; a failed streams request only skips that category.
"""

import json
import logging
from typing import Any, List, Optional

from .api_client import NO_RESPONSE_STATUS, get_live_categories, get_live_streams
from .exceptions import HTTPStatusError, MalformedResponseError, NetworkError
from .filters import FilterCriteria, build_category_matcher
from .report import ReportWriter, RunTotals, write_listing_header, write_summary
from .responses import Category, count_streams, extract_channel_names, is_valid_json, parse_categories
from .utils import SanitizedLogger, first_lines


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = SanitizedLogger(logging.getLogger(__name__))


def classify_http_failure(status: int, config: Any) -> List[str]:
    """
    Explain a failed categories request.

    Args:
        status (int): HTTP status code, 0 when there was no response
        config: Configuration object with connection settings

    Returns:
        List[str]: Diagnostic lines
    """
    if status == NO_RESPONSE_STATUS:
        return [
            "This indicates a network issue, timeout, or that the host/port is incorrect or unreachable.",
            f"Host tried: {config.HOST}",
            f"Timeout: {config.TIMEOUT}s",
        ]
    if status == 404:
        return [
            "A '404 Not Found' error was received. This could mean:",
            f"  1. The Host URL ('{config.HOST}') or the API path ('{config.API_PATH}') is incorrect.",
            "  2. The provider's server is misconfigured or the player API is not enabled.",
            "  3. Some providers return 404 for incorrect username/password or other access issues.",
            "Please double-check all connection details and credentials.",
        ]
    if status in (401, 403):
        return [
            "An 'Authorization Required' (401) or 'Forbidden' (403) error suggests an issue with credentials or access rights.",
            "Please verify your username and password.",
            "It's also possible your IP is blocked or the account is inactive.",
        ]
    return ["The server returned an unexpected HTTP error."]


def fetch_categories(config: Any) -> Any:
    """
    Fetch and decode the live categories payload.

    Args:
        config: Configuration object with connection settings

    Returns:
        list: Decoded categories array

    Raises:
        NetworkError: No response was received
        HTTPStatusError: The provider answered with a status other than 200
        MalformedResponseError: The body is not JSON or not a JSON array
    """
    status, body = get_live_categories(config)

    if status != 200:
        error_class = NetworkError if status == NO_RESPONSE_STATUS else HTTPStatusError
        raise error_class(
            f"API request failed with HTTP status code: {status}",
            status=status,
            body=body,
            diagnostics=classify_http_failure(status, config),
        )

    if not is_valid_json(body):
        raise MalformedResponseError(
            "API request was successful (HTTP 200), but the response was not valid JSON.",
            status=status,
            body=body,
            diagnostics=[
                "This could mean the provider's API is misconfigured, or it returned an HTML page "
                "for other reasons (e.g., a redirect, a soft error page).",
                "It might also indicate an issue with username/password if the provider returns "
                "non-JSON on auth failure even with HTTP 200.",
                "Please verify all details, including credentials.",
            ],
        )

    payload = json.loads(body)
    if not isinstance(payload, list):
        raise MalformedResponseError(
            "API request was successful (HTTP 200), but the response was not a list of categories.",
            status=status,
            body=body,
            diagnostics=[
                "Some providers answer with an account status object instead of categories "
                "when the username/password is wrong or the account is disabled.",
                "Please verify all details, including credentials.",
            ],
        )
    return payload


def list_category_channels(config: Any, category: Category, writer: ReportWriter, verbose: bool = False) -> Optional[int]:
    """
    Print the channels of one category.

    Args:
        config: Configuration object with connection settings
        category (Category): Category to list
        writer (ReportWriter): Report output
        verbose (bool): Echo unusable response bodies

    Returns:
        Optional[int]: Number of channel names printed, None when the category was skipped
    """
    writer.line()
    writer.line(f"Category: {category.name} (ID: {category.id})")

    status, body = get_live_streams(config, category.id)

    if not body:
        logger.warning(f"Failed to fetch streams for category '{category.name}'. No response (HTTP status {status}).")
        return None
    if not is_valid_json(body):
        logger.warning(f"Received non-JSON for streams in category '{category.name}'.")
        if verbose:
            for line in first_lines(body):
                logger.warning(line)
        return None

    payload = json.loads(body)
    names = extract_channel_names(payload)
    for name in names:
        writer.line(f"  {name}")

    if not names:
        if count_streams(payload) == 0:
            writer.line("  (No channels returned by API for this category)")
        else:
            writer.line("  (Streams found by API, but no valid channel names to display after filtering)")

    return len(names)


def list_channels(config: Any, criteria: FilterCriteria, writer: Optional[ReportWriter] = None,
                  verbose: bool = False) -> RunTotals:
    """
    Run the full listing: categories, filter, channels per category, summary.

    Args:
        config: Validated configuration object
        criteria (FilterCriteria): Category name filter
        writer (ReportWriter): Report output, stdout when omitted
        verbose (bool): Echo unusable response bodies

    Returns:
        RunTotals: Category and channel counters

    Raises:
        CategoryFetchError: The categories request failed
    """
    if writer is None:
        writer = ReportWriter()

    logger.info("Fetching IPTV data...")
    payload = fetch_categories(config)

    categories = parse_categories(payload)
    totals = RunTotals()
    totals.available_category_count = len(payload)
    logger.debug(f"Provider returned {len(payload)} categories, {len(categories)} usable")

    matches = build_category_matcher(criteria)
    write_listing_header(writer, criteria)

    for category in categories:
        if not matches(category.name):
            continue

        totals.matching_category_count += 1
        channel_count = list_category_channels(config, category, writer, verbose)
        if channel_count:
            totals.total_channel_count += channel_count

    write_summary(writer, totals, criteria)
    logger.info(f"Listed {totals.total_channel_count} channels in {totals.matching_category_count} categories")
    return totals
