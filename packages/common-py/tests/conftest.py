"""Pytest configuration and fixtures for common-py tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import logging
import sys
from pathlib import Path

import pytest

# Make the package importable when running from a source checkout
package_root = str(Path(__file__).parent.parent)
if package_root not in sys.path:
    sys.path.insert(0, package_root)


class ListHandler(logging.Handler):
    """Collects emitted records."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured_logger():
    """A stencil logger name with a handler collecting its records."""
    name = "stencil.tests.capture"
    std_logger = logging.getLogger(name)
    handler = ListHandler()
    std_logger.addHandler(handler)
    std_logger.setLevel(logging.DEBUG)
    yield name, handler
    std_logger.removeHandler(handler)


@pytest.fixture
def clean_request_id():
    """Ensure no request id leaks between tests."""
    from stencil_common import clear_request_id

    clear_request_id()
    yield
    clear_request_id()
