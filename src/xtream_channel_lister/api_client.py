"""
Xtream Codes player API client.

This module builds player API URLs and performs the HTTP requests. It only
reports what happened (status code and body), deciding whether a response
is usable is left to the caller.
"""

import logging
from http.client import HTTPException
from typing import Any, List, Tuple
from urllib.error import HTTPError
from urllib.parse import urlencode
from urllib.request import urlopen

from .config import Config
from .utils import SanitizedLogger


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = SanitizedLogger(logging.getLogger(__name__))

# Status reported when no HTTP response was received at all
NO_RESPONSE_STATUS = 0


def build_player_api_url(config: Any, action: str, **params) -> str:
    """
    Build a player API URL with credentials and action in the query string.

    Args:
        config: Configuration object with connection settings
        action (str): API action, e.g. 'get_live_categories'
        **params: Extra query parameters (e.g. category_id)

    Returns:
        str: Full request URL
    """
    query: List[Tuple[str, str]] = [
        ('username', config.USERNAME),
        ('password', config.PASSWORD),
        ('action', action),
    ]
    query.extend((key, str(value)) for key, value in params.items())
    return f"{config.API_ENDPOINT}?{urlencode(query)}"


def _read_body(response) -> str:
    """Read a response body in chunks, refusing oversized responses"""
    content_chunks = []
    total_size = 0

    while True:
        chunk = response.read(8192)  # Read in 8KB chunks
        if not chunk:
            break

        total_size += len(chunk)

        # Security: Check if the response exceeds maximum allowed size
        if total_size > Config.MAX_RESPONSE_SIZE:
            raise ValueError(f"Response exceeds maximum allowed size of {Config.MAX_RESPONSE_SIZE} bytes")

        content_chunks.append(chunk)

    return b''.join(content_chunks).decode('utf-8', errors='replace')


def fetch(url: str, timeout: int) -> Tuple[int, str]:
    """
    Perform a GET request.

    Args:
        url (str): Full request URL
        timeout (int): Timeout in seconds

    Returns:
        Tuple[int, str]: HTTP status code and body text. The status is 0 and the
        body empty when the request failed before a response was received.
    """
    logger.debug(f"GET {url}")

    try:
        response = urlopen(url, timeout=timeout)
    except HTTPError as e:
        # Non-2xx replies still carry a status and usually a body
        try:
            body = _read_body(e)
        except (OSError, HTTPException, ValueError):
            body = ''
        finally:
            e.close()
        logger.debug(f"HTTP {e.code} from {url}")
        return e.code, body
    except (OSError, HTTPException, ValueError) as e:
        logger.debug(f"No response from {url}: {e}")
        return NO_RESPONSE_STATUS, ''

    try:
        status = response.status
        body = _read_body(response)
    except (OSError, HTTPException, ValueError) as e:
        logger.warning(f"Error reading response from {url}: {e}")
        return NO_RESPONSE_STATUS, ''
    finally:
        response.close()

    logger.debug(f"HTTP {status} from {url}, {len(body)} characters")
    return status, body


def get_live_categories(config: Any) -> Tuple[int, str]:
    """
    Request the list of live categories.

    Args:
        config: Configuration object with connection settings

    Returns:
        Tuple[int, str]: HTTP status code and body text
    """
    url = build_player_api_url(config, 'get_live_categories')
    logger.debug(f"Calling API for categories: {url}")
    return fetch(url, config.TIMEOUT)


def get_live_streams(config: Any, category_id: str) -> Tuple[int, str]:
    """
    Request the live streams of one category.

    Args:
        config: Configuration object with connection settings
        category_id (str): Provider category ID

    Returns:
        Tuple[int, str]: HTTP status code and body text
    """
    url = build_player_api_url(config, 'get_live_streams', category_id=category_id)
    logger.debug(f"Calling API for streams in category {category_id}: {url}")
    return fetch(url, config.TIMEOUT)
