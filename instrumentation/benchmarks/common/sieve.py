"""
Sieve of Eratosthenes - the CPU-bound workload.

The counter is timed externally: `time_prime_count` captures a monotonic
timestamp immediately before and after the call. It runs on the calling
thread, which is the same thread that drives the frame ticks, so the
result is the total blocking latency seen by everything scheduled there.
"""

from typing import Callable, Tuple

from .capabilities import monotonic_microseconds


def count_primes(limit: int) -> int:
    """
    Count the primes in [2, limit] with a boolean sieve of size limit + 1.

    For limit = 1,000,000 the expected result is 78,498 primes.
    """
    if limit < 2:
        return 0

    is_prime = [True] * (limit + 1)
    is_prime[0] = False
    is_prime[1] = False

    p = 2
    while p * p <= limit:
        if is_prime[p]:
            # Mark every multiple of p from p*p as composite
            is_prime[p * p::p] = [False] * len(range(p * p, limit + 1, p))
        p += 1

    return sum(is_prime)


def time_prime_count(
    limit: int,
    clock: Callable[[], int] = monotonic_microseconds
) -> Tuple[int, int]:
    """
    Run the sieve and time it with a monotonic clock.

    Returns:
        Tuple of (prime_count, elapsed_us)
    """
    start = clock()
    prime_count = count_primes(limit)
    elapsed_us = clock() - start
    return prime_count, elapsed_us
