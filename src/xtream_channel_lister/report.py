"""
Report output module.

Writes the channel listing to stdout while keeping a copy of every line,
and turns the run totals into the closing summary.
"""

import sys
import logging
from typing import List, Optional, TextIO

from .filters import FilterCriteria, describe_filter, describe_filter_for_summary
from .utils import SanitizedLogger


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = SanitizedLogger(logging.getLogger(__name__))

SEPARATOR = "-" * 51


class RunTotals:
    """Counters accumulated while listing categories"""

    def __init__(self):
        self.available_category_count = 0
        self.matching_category_count = 0
        self.total_channel_count = 0

    def __eq__(self, other) -> bool:
        return isinstance(other, RunTotals) and vars(self) == vars(other)

    def __repr__(self) -> str:
        return (f"RunTotals(available={self.available_category_count}, "
                f"matching={self.matching_category_count}, channels={self.total_channel_count})")


class ReportWriter:
    """
    Prints report lines and remembers them so the report can be exported.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lines: List[str] = []

    def line(self, text: str = '') -> None:
        self._lines.append(text)
        print(text, file=self._stream if self._stream is not None else sys.stdout)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def getvalue(self) -> str:
        """Full report text"""
        return '\n'.join(self._lines) + '\n' if self._lines else ''


def write_listing_header(writer: ReportWriter, criteria: FilterCriteria) -> None:
    """Announce which categories are about to be listed"""
    writer.line()
    if criteria.is_active:
        writer.line(f"Filtering for categories {describe_filter(criteria)} ({criteria.sensitivity_text}):")
    else:
        writer.line("Processing all live categories:")
    writer.line(SEPARATOR)


def write_summary(writer: ReportWriter, totals: RunTotals, criteria: FilterCriteria) -> None:
    """
    Write the closing summary.

    Args:
        writer (ReportWriter): Report output
        totals (RunTotals): Counters from the listing pipeline
        criteria (FilterCriteria): Filter used for the run
    """
    writer.line(SEPARATOR)

    if totals.matching_category_count == 0:
        if totals.available_category_count == 0:
            logger.warning("Successfully connected (HTTP 200) and received valid JSON, but the provider returned no live categories.")
            logger.warning("This could mean:")
            logger.warning("  1. There are genuinely no categories available on your account.")
            logger.warning("  2. Your account is inactive or has restrictions.")
            logger.warning("  3. Your username/password may be incorrect and the provider returns an empty list instead of an error.")
        elif criteria.is_active:
            writer.line("No categories found matching your filter criteria.")
        else:
            logger.warning("No live categories were processed. The provider response was valid JSON "
                           "but its entries did not have the expected category_id/category_name fields.")
        return

    writer.line("Summary:")
    if criteria.is_active:
        writer.line(f"  Categories matching criteria ({describe_filter_for_summary(criteria)}, "
                    f"{criteria.sensitivity_text}): {totals.matching_category_count}")
    else:
        writer.line(f"  Total live categories processed: {totals.matching_category_count}")
    writer.line(f"  Overall total channels listed: {totals.total_channel_count}")
