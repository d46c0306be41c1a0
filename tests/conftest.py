"""Pytest fixtures for blastanalysis tests."""

import matplotlib
matplotlib.use("Agg")

import pytest

from blastanalysis import config
from blastanalysis.model.pi_curve import CurveCollection, SingleCurve


@pytest.fixture
def descending_curve() -> SingleCurve:
    """Curve along I + P = 4 for I in [1, 3]."""
    return SingleCurve(config.DEMO_CURVE_1)


@pytest.fixture
def upper_curve() -> SingleCurve:
    """Second demo curve, above and to the left of the first."""
    return SingleCurve(config.DEMO_CURVE_2)


@pytest.fixture
def collection(descending_curve, upper_curve) -> CurveCollection:
    """Collection of the two demo curves."""
    return CurveCollection([descending_curve, upper_curve])
