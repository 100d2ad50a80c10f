"""
Category filtering module.

Builds the predicate that decides which live categories are listed and
the human readable descriptions of the active filter.
"""

from typing import Callable, List, Optional, Tuple


# Only A-Z are folded, non-ASCII letters keep their case
_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def ascii_lower(text: str) -> str:
    """
    Lowercase ASCII letters only.

    Args:
        text (str): Text to fold

    Returns:
        str: Text with A-Z replaced by a-z
    """
    return text.translate(_ASCII_LOWER)


class FilterCriteria:
    """
    Category name filter: optional prefix, optional substring, case rule.

    An empty or missing prefix/contains string is treated as not configured.
    """

    def __init__(self, prefix: Optional[str] = None, contains: Optional[str] = None, case_sensitive: bool = False):
        self._prefix = prefix or None
        self._contains = contains or None
        self._case_sensitive = bool(case_sensitive)

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def contains(self) -> Optional[str]:
        return self._contains

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def is_active(self) -> bool:
        """True when at least one of prefix/contains is set"""
        return self._prefix is not None or self._contains is not None

    @property
    def sensitivity_text(self) -> str:
        return 'case-sensitive' if self._case_sensitive else 'case-insensitive'

    def __repr__(self) -> str:
        return (f"FilterCriteria(prefix={self._prefix!r}, contains={self._contains!r}, "
                f"case_sensitive={self._case_sensitive})")


def build_category_matcher(criteria: FilterCriteria) -> Callable[[str], bool]:
    """
    Compile filter criteria into a predicate over category names.

    Args:
        criteria (FilterCriteria): Prefix/contains strings and case rule

    Returns:
        Callable[[str], bool]: Returns True when a category name passes every configured check
    """
    fold = (lambda text: text) if criteria.case_sensitive else ascii_lower

    prefix = fold(criteria.prefix) if criteria.prefix else ''
    contains = fold(criteria.contains) if criteria.contains else ''

    def matches(category_name: str) -> bool:
        name = fold(category_name)
        if prefix and not name.startswith(prefix):
            return False
        if contains and contains not in name:
            return False
        return True

    return matches


def _join_clauses(pairs: List[Tuple[str, str]]) -> str:
    return ' and '.join(f'{label} "{value}"' for label, value in pairs)


def describe_filter(criteria: FilterCriteria) -> str:
    """
    Describe the filter for the listing header.

    Returns:
        str: e.g. 'starting with "US|" and containing "news"', empty when no filter is set
    """
    pairs = []
    if criteria.prefix:
        pairs.append(('starting with', criteria.prefix))
    if criteria.contains:
        pairs.append(('containing', criteria.contains))
    return _join_clauses(pairs)


def describe_filter_for_summary(criteria: FilterCriteria) -> str:
    """
    Describe the filter for the closing summary.

    Returns:
        str: e.g. 'prefix "US|" and containing "news"', empty when no filter is set
    """
    pairs = []
    if criteria.prefix:
        pairs.append(('prefix', criteria.prefix))
    if criteria.contains:
        pairs.append(('containing', criteria.contains))
    return _join_clauses(pairs)
