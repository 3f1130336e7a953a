"""Unit tests for rating arithmetic."""

import pytest

from warranty_manager.domain.ratings import mean_rating, round_half_up


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [
        (4.5, 0, 5.0),
        (2.5, 0, 3.0),
        (3.75, 0, 4.0),
        (4.25, 1, 4.3),
        (4.666666, 1, 4.7),
    ],
)
def test_round_half_up(value, digits, expected):
    assert round_half_up(value, digits) == expected


def test_mean_rating_of_nothing_is_zero():
    assert mean_rating([]) == 0.0


def test_mean_rating():
    assert mean_rating([5, 4, 5, 1]) == 3.75
