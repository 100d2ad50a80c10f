"""
Exception types raised by the channel lister.

Only failures that end the run are raised. Problems with a single
category's streams are logged and skipped by the listing pipeline.
"""

from typing import List, Optional


class ListerError(Exception):
    """Base class for all channel lister errors"""


class ConfigError(ListerError):
    """Missing or invalid connection settings"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class CategoryFetchError(ListerError):
    """
    The live categories request failed, so nothing can be listed.

    Attributes:
        status (int): HTTP status code, 0 when no connection was made
        body (str): Raw response body (may be empty)
        diagnostics (List[str]): Human readable lines explaining the failure
    """

    def __init__(self, message: str, status: int = 0, body: str = '', diagnostics: Optional[List[str]] = None):
        super().__init__(message)
        self.status = status
        self.body = body
        self.diagnostics = diagnostics or []


class NetworkError(CategoryFetchError):
    """Connection refused, DNS failure or timeout"""


class HTTPStatusError(CategoryFetchError):
    """The provider answered with a status other than 200"""


class MalformedResponseError(CategoryFetchError):
    """The provider answered 200 but the body is not usable JSON"""
