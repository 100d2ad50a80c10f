"""
Utility module for common helper functions.

This module contains utility functions for sanitizing credentials from logs
and other common operations.
"""

import os
import re
from typing import List, Set


# Values registered at runtime (e.g. a password typed at the prompt)
_registered_secrets: Set[str] = set()

# Environment variables whose values must never reach the logs
SENSITIVE_ENV_VARS: List[str] = [
    'XTREAM_PASSWORD',
    'AWS_SECRET_ACCESS_KEY',
]

# Secrets shorter than this are only masked inside URL query strings
MIN_SECRET_LENGTH = 6


def register_secret(value: str) -> None:
    """
    Register a value that must be masked in every log message.

    Args:
        value (str): Secret value (empty values are ignored)
    """
    if value:
        _registered_secrets.add(value)


def clear_secrets() -> None:
    """Forget all registered secrets"""
    _registered_secrets.clear()


def mask_value(value: str) -> str:
    """
    Mask a secret, keeping a few characters at each end of long values.

    Args:
        value (str): Secret value

    Returns:
        str: Masked value
    """
    if len(value) <= 8:
        return '*' * len(value)
    visible_chars = max(2, len(value) // 6)
    return f"{value[:visible_chars]}{'*' * (len(value) - 2 * visible_chars)}{value[-visible_chars:]}"


def sanitize_log_message(message: str) -> str:
    """
    Sanitize log messages by replacing sensitive data with masked values.

    Args:
        message (str): Original log message

    Returns:
        str: Sanitized log message with sensitive data masked
    """
    sanitized_message = message

    # Mask credentials inside URLs first, the query string is where the
    # player API carries the password
    url_pattern = r'https?://[^\s\'"<>]+'
    for url in re.findall(url_pattern, message):
        sanitized_message = sanitized_message.replace(url, mask_url(url))

    sensitive_values = set(_registered_secrets)
    for var_name in SENSITIVE_ENV_VARS:
        env_val = os.getenv(var_name)
        if env_val:
            sensitive_values.add(env_val)
    sensitive_values = {value for value in sensitive_values if len(value) >= MIN_SECRET_LENGTH}

    # Replace longer strings first
    for value in sorted(sensitive_values, key=len, reverse=True):
        sanitized_message = sanitized_message.replace(value, mask_value(value))

    return sanitized_message


def mask_url(url: str) -> str:
    """
    Mask sensitive query parameters and embedded credentials of a URL.

    Args:
        url (str): Original URL

    Returns:
        str: Masked URL
    """
    try:
        from urllib.parse import urlparse, urlunparse
        parsed = urlparse(url)

        netloc = parsed.netloc
        if '@' in netloc:
            netloc = '***@' + netloc.rsplit('@', 1)[1]

        return urlunparse((
            parsed.scheme,
            netloc,
            parsed.path,
            parsed.params,
            mask_sensitive_query(parsed.query),
            parsed.fragment
        ))
    except ValueError:
        # If parsing fails, return a generic masked version
        return f"{url.split('://')[0]}://***.***"


def mask_sensitive_query(query: str) -> str:
    """
    Mask sensitive parts of a URL query string.

    Args:
        query (str): Query string

    Returns:
        str: Masked query string
    """
    if not query:
        return query

    masked_pairs = []

    for pair in query.split('&'):
        if '=' in pair:
            key, value = pair.split('=', 1)
            if is_potentially_sensitive_param(key):
                masked_pairs.append(f"{key}={'*' * 8}")
            else:
                masked_pairs.append(pair)
        else:
            masked_pairs.append(pair)

    return '&'.join(masked_pairs)


def is_potentially_sensitive_param(param_name: str) -> bool:
    """
    Check if a query parameter name is potentially sensitive.

    Args:
        param_name (str): Parameter name to check

    Returns:
        bool: True if parameter is potentially sensitive
    """
    sensitive_params = [
        'password', 'pass', 'passwd', 'token', 'key', 'secret', 'auth',
        'access_token', 'api_key', 'signature'
    ]

    return param_name.lower() in sensitive_params


def first_lines(text: str, count: int = 10) -> List[str]:
    """
    Return the first lines of a text, used to echo provider responses.

    Args:
        text (str): Text to cut
        count (int): Maximum number of lines

    Returns:
        List[str]: At most ``count`` lines
    """
    return text.splitlines()[:count]


class SanitizedLogger:
    """
    A wrapper around a logger that sanitizes messages before logging.
    """

    def __init__(self, logger):
        self.logger = logger

    def debug(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.debug(sanitized_msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.info(sanitized_msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.warning(sanitized_msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.error(sanitized_msg, *args, **kwargs)

    def critical(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.critical(sanitized_msg, *args, **kwargs)

    def exception(self, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.exception(sanitized_msg, *args, **kwargs)

    def log(self, level, msg, *args, **kwargs):
        sanitized_msg = sanitize_log_message(str(msg))
        self.logger.log(level, sanitized_msg, *args, **kwargs)
