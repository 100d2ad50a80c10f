"""
Xtream Channel Lister Package

This package lists the live categories and channels of an Xtream Codes IPTV
provider, with optional prefix/substring filtering of category names.
"""

from .api_client import get_live_categories, get_live_streams
from .config import Config
from .filters import FilterCriteria, build_category_matcher
from .pipeline import list_channels
from .report import RunTotals

__version__ = "1.0.0"
