import pytest

from algos.arithmetic import factorial


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 1),
        (1, 1),
        (2, 2),
        (3, 6),
        (5, 120),
        (7, 5040),
        (12, 479001600),
    ],
)
def test_source_cases(n, expected):
    assert factorial(n) == expected


def test_thirteen_overflows():
    with pytest.raises(OverflowError):
        factorial(13)


def test_negative_rejected():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("n", range(1, 13))
def test_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)