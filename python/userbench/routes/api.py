from typing import List

from userbench.benchmark import run_benchmark
from userbench.generator import generate_users
from userbench.models import BenchmarkResult, User
from userbench.router import Router

router = Router()


@router.get("/users", tags=["users"], response_model=List[User])
def get_users():
    """Return 10,000 deterministic synthetic users."""
    return generate_users()


@router.get("/benchmark", tags=["benchmark"], response_model=BenchmarkResult)
def benchmark():
    """Count primes below one million by trial division and report timing and memory."""
    return run_benchmark()
