"""
CPU-bound prime counting probe.

The primality test is deliberately naive trial division. It exists to burn a
predictable amount of CPU per request, so it must not be replaced by a sieve.
"""

import logging
import os
import time

import psutil

from userbench.models import BenchmarkResult

logger = logging.getLogger("userbench")

PRIME_LIMIT = 1_000_000
BYTES_PER_MB = 1024 * 1024


def count_primes(limit: int) -> int:
    """Count the primes strictly below ``limit`` by trial division."""
    found = 0
    for n in range(2, limit):
        is_prime = True
        j = 2
        while j * j <= n:
            if n % j == 0:
                is_prime = False
                break
            j += 1
        if is_prime:
            found += 1
    return found


def working_set_mb() -> float:
    "Resident memory of the current process in megabytes."
    return psutil.Process(os.getpid()).memory_info().rss / BYTES_PER_MB


class PrimeBenchmark:
    """
    Times one run of ``count_primes`` and samples process statistics.

    Usage:
        result = PrimeBenchmark().run()
        assert result.primes_found == 78498
    """

    def __init__(self, limit: int = PRIME_LIMIT) -> None:
        self.limit = limit

    def run(self) -> BenchmarkResult:
        start = time.perf_counter()
        primes_found = count_primes(self.limit)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        logger.debug("counted %d primes below %d in %dms", primes_found, self.limit, elapsed_ms)
        return BenchmarkResult(
            execution_time_ms=elapsed_ms,
            primes_found=primes_found,
            process_id=os.getpid(),
            working_set_mb=working_set_mb(),
        )


def run_benchmark() -> BenchmarkResult:
    return PrimeBenchmark().run()
