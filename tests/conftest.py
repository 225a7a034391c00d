"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def book_data():
    """
    Hollander, Wolfe & Chicken, Nonparametric Statistical Methods,
    3rd ed., Example 4.1. Both samples already sorted, no ties.
    """
    x = [0.73, 0.80, 0.83, 1.04, 1.38, 1.45, 1.46, 1.64, 1.89, 1.91]
    y = [0.74, 0.88, 0.90, 1.15, 1.21]
    return x, y


@pytest.fixture
def contrived_data():
    """Two overlapping samples (n_x=50, n_y=55) with ties across samples."""
    x = [
        85., 90., 78., 92., 88., 76., 95., 89., 91., 82., 115., 120., 108., 122., 118., 106.,
        125., 119., 121., 112., 145., 150., 138., 152., 148., 136., 155., 149., 151., 142.,
        175., 180., 168., 182., 178., 166., 185., 179., 181., 172., 205., 210., 198., 212.,
        208., 196., 215., 209., 211., 202.,
    ]
    y = [
        70., 85., 80., 90., 75., 88., 92., 79., 86., 81., 92., 100., 115., 110., 120., 105.,
        118., 122., 109., 116., 111., 122., 130., 145., 140., 150., 135., 148., 152., 139.,
        146., 141., 152., 160., 175., 170., 180., 165., 178., 182., 169., 176., 171., 182.,
        190., 205., 200., 210., 195., 208., 212., 199., 206., 201., 212.,
    ]
    return sorted(x), sorted(y)
