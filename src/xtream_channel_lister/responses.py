"""
Player API response handling.

Checks that response bodies are JSON and pulls categories and channel
names out of the decoded payloads. Unexpected fields are skipped or
defaulted rather than raising.
"""

import json
from typing import Any, List, Optional


UNNAMED_CHANNEL = "Unnamed Channel"


class Category:
    """A live category as returned by get_live_categories"""

    def __init__(self, category_id: str, name: str):
        self.id = category_id
        self.name = name

    @classmethod
    def from_api(cls, entry: Any) -> Optional['Category']:
        """
        Build a category from one element of the categories array.

        Returns:
            Optional[Category]: None when the element lacks category_id or category_name
        """
        if not isinstance(entry, dict):
            return None
        category_id = entry.get('category_id')
        category_name = entry.get('category_name')
        if category_id is None or category_name is None:
            return None
        return cls(str(category_id), str(category_name))

    def __eq__(self, other) -> bool:
        return isinstance(other, Category) and (self.id, self.name) == (other.id, other.name)

    def __repr__(self) -> str:
        return f"Category(id={self.id!r}, name={self.name!r})"


def is_valid_json(text: str) -> bool:
    """
    Check that a response body parses as a JSON value.

    Args:
        text (str): Raw body

    Returns:
        bool: False for empty bodies and text that is not JSON
    """
    if not text or not text.strip():
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def parse_categories(payload: Any) -> List[Category]:
    """
    Turn a decoded categories payload into categories, keeping provider order.

    Args:
        payload: Decoded JSON, expected to be a list of category objects

    Returns:
        List[Category]: Valid categories; malformed elements are dropped
    """
    if not isinstance(payload, list):
        return []
    categories = []
    for entry in payload:
        category = Category.from_api(entry)
        if category is not None:
            categories.append(category)
    return categories


def count_streams(payload: Any) -> int:
    """Number of stream objects the API returned (0 when the payload is not an array)"""
    return len(payload) if isinstance(payload, list) else 0


def extract_channel_names(payload: Any) -> List[str]:
    """
    Pull printable channel names out of a decoded streams payload.

    A missing or null name becomes "Unnamed Channel". Empty names are left out.

    Args:
        payload: Decoded JSON, expected to be a list of stream objects

    Returns:
        List[str]: Channel names in provider order
    """
    if not isinstance(payload, list):
        return []

    names = []
    for stream in payload:
        if not isinstance(stream, dict):
            continue
        name = stream.get('name')
        if name is None:
            name = UNNAMED_CHANNEL
        name = str(name)
        if name:
            names.append(name)
    return names
