"""Shared test fixtures for labelframe tests."""

import pytest

from labelframe import Frame


@pytest.fixture
def animals():
    """Two animals; rows and columns come out sorted by name."""
    return Frame.create(
        {
            "snake": {"length": 10, "height": 1},
            "giraffe": {"length": 3, "height": 10},
        }
    )


@pytest.fixture
def three_animals():
    """Three animals: bug, giraffe, snake."""
    return Frame.create(
        {
            "snake": {"length": 10, "height": 1},
            "giraffe": {"length": 3, "height": 10},
            "bug": {"length": 1, "height": 0},
        }
    )
