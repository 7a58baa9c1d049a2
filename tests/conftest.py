"""Shared fixtures for the successdist test suite."""

from typing import List

import pytest


@pytest.fixture
def skewed_vector() -> List[float]:
    return [0.05, 0.9, 0.3, 0.65, 0.5, 0.12, 0.77]
