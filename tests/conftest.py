"""Pytest configuration for Prism tests.

Provides the shared StandardCurveTable (built once per session, as in
production) and resets the runtime debug toggle around every test.
"""

import pytest

from prism_converter import SampledSpectrumConverter
from prism_curves import initialize
from prism_spectrum import set_debug_checks


@pytest.fixture(scope="session")
def table():
    """The process-wide standard curve table."""
    return initialize()


@pytest.fixture(scope="session")
def converter(table):
    return SampledSpectrumConverter(table)


@pytest.fixture(autouse=True)
def reset_debug_checks():
    """Debug checks are process-global; keep tests isolated."""
    set_debug_checks(False)
    yield
    set_debug_checks(False)
