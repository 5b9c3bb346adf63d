"""
userbench: a minimal HTTP API demo.
Serves 10,000 deterministic synthetic users and a CPU-bound prime counting benchmark.
"""

__version__ = "1.0.0"

from userbench.app import UserBench
from userbench.apps import create_app, create_minimal_app, create_standard_app
from userbench.benchmark import PrimeBenchmark, count_primes, run_benchmark
from userbench.config import Settings, configure_logging
from userbench.exceptions import HTTPException, SerializationError
from userbench.generator import UserDataGenerator, build_user, generate_users
from userbench.middleware import AccessLogMiddleware, ErrorHandlerMiddleware, Middleware
from userbench.models import Address, BenchmarkResult, Company, Preferences, User
from userbench.router import Router
from userbench.serialization import PrecompiledSerializer, ReflectionSerializer, Serializer
from userbench.testclient import TestClient

__all__ = [
    "UserBench",
    "Router",
    "Middleware",
    "AccessLogMiddleware",
    "ErrorHandlerMiddleware",
    "HTTPException",
    "SerializationError",
    "Settings",
    "configure_logging",
    "create_app",
    "create_standard_app",
    "create_minimal_app",
    "User",
    "Address",
    "Company",
    "Preferences",
    "BenchmarkResult",
    "UserDataGenerator",
    "build_user",
    "generate_users",
    "PrimeBenchmark",
    "count_primes",
    "run_benchmark",
    "Serializer",
    "ReflectionSerializer",
    "PrecompiledSerializer",
    "TestClient",
]
