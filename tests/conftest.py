# SPDX-License-Identifier: Apache-2.0
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Mark timing-oriented tests as slow."""
    for item in items:
        if "speedup" in item.name.lower() or "large" in item.name.lower():
            item.add_marker(pytest.mark.slow)
