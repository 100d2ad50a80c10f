"""
Pytest configuration file for Xtream channel lister tests.
"""

import sys
import os

import pytest

# Add the src directory to the Python path to enable imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from xtream_channel_lister.utils import clear_secrets


@pytest.fixture(autouse=True)
def _forget_secrets():
    """Secrets registered by one test must not mask output in the next"""
    yield
    clear_secrets()
