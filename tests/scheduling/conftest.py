"""Fixtures for scheduling tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import numpy as np
import pytest
from pytest_mock import MockerFixture


@pytest.fixture
def mock_rng(mocker: MockerFixture) -> MagicMock:
    """Provide a random generator mock that records permutation draws.

    Parameters
    ----------
    mocker : MockerFixture
        Pytest-mock fixture.

    Returns
    -------
    MagicMock
        Mock with the numpy Generator interface.
    """
    return mocker.MagicMock(spec=np.random.Generator)
