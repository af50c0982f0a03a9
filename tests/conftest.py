"""
Shared fixtures.
"""

import pytest

from responsive_srcset.url import DeliveryUrl
from responsive_srcset.utils.debug_logger import SrcsetLogger


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Start every test with a silent logger and no file output."""
    monkeypatch.setenv("SRCSET_DEBUG_LEVEL", "NONE")
    monkeypatch.setenv("SRCSET_LOG_TO_FILE", "false")
    SrcsetLogger.reset()
    yield
    SrcsetLogger._instance = None


@pytest.fixture
def demo_url():
    return DeliveryUrl(cloud_name="demo")
