"""Shared pytest fixtures for fieldagg tests."""

import pytest


@pytest.fixture
def two_records():
    """Two trading rows with volume and price."""
    return [
        {"volume": 10, "price": 5},
        {"volume": 20, "price": 6},
    ]


@pytest.fixture
def three_records():
    """Three trading rows with volume and price."""
    return [
        {"volume": 10, "price": 5},
        {"volume": 20, "price": 6},
        {"volume": 15, "price": 7},
    ]
