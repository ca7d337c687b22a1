import pytest

from instrumentation.benchmarks.common import count_primes, time_prime_count


def test_count_primes_up_to_one_million():
    assert count_primes(1000000) == 78498


def test_count_primes_up_to_ten():
    # 2, 3, 5, 7
    assert count_primes(10) == 4


@pytest.mark.parametrize("limit", [-5, 0, 1])
def test_count_primes_below_two_is_zero(limit):
    assert count_primes(limit) == 0


@pytest.mark.parametrize("limit,expected", [(2, 1), (3, 2), (4, 2), (100, 25), (10000, 1229)])
def test_count_primes_small_limits(limit, expected):
    assert count_primes(limit) == expected


def test_time_prime_count_uses_clock_around_the_call():
    readings = iter([1000, 46230])

    prime_count, elapsed_us = time_prime_count(10, clock=lambda: next(readings))

    assert prime_count == 4
    assert elapsed_us == 45230


def test_time_prime_count_with_real_clock_is_non_negative():
    prime_count, elapsed_us = time_prime_count(1000)

    assert prime_count == 168
    assert elapsed_us >= 0
