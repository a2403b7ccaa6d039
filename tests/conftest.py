"""
Pytest configuration and shared fixtures for boltweight tests.
"""

import json
import pytest


# ─── Raw bolt lists ──────────────────────────────────────────────────────


@pytest.fixture
def metric_items():
    """A small metric bolt list."""
    return [
        {"size": "M10", "length": 50, "quantity": 4},
        {"size": "M8", "length": 30, "quantity": 10},
        {"size": "M12", "length": 60, "quantity": 2},
    ]


@pytest.fixture
def inch_items():
    """A small ASME bolt list."""
    return [
        {"size": "1/2", "length": 3, "quantity": 2},
        {"size": "1/4", "length": 1.5, "quantity": 8},
    ]


# ─── Files on disk ───────────────────────────────────────────────────────


@pytest.fixture
def batch_file(tmp_path, metric_items):
    """Bolt list JSON in object form with shared settings."""
    path = tmp_path / "bolts.json"
    path.write_text(json.dumps({
        "standard": "ISO",
        "material": "stainless_steel",
        "items": metric_items,
    }))
    return path


@pytest.fixture
def bare_list_file(tmp_path, inch_items):
    """Bolt list JSON as a bare list."""
    path = tmp_path / "list.json"
    path.write_text(json.dumps(inch_items))
    return path
