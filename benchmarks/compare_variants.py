"""Compare /users and /benchmark latency between the standard and minimal variants."""
import argparse
import statistics
import time

import httpx

from userbench import create_minimal_app, create_standard_app
from userbench.testclient import TestClient


def time_endpoint(client, endpoint, rounds):
    """Return per-request latencies in milliseconds."""
    samples = []
    for _ in range(rounds):
        start = time.perf_counter()
        resp = client.get(endpoint)
        samples.append((time.perf_counter() - start) * 1000)
        assert resp.status_code == 200, resp.text
    return samples


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--rounds", type=int, default=20)
    parser.add_argument("--benchmark-rounds", type=int, default=2)
    args = parser.parse_args()

    print("=" * 60)
    print("  USERBENCH VARIANT COMPARISON")
    print("=" * 60)

    results = {}
    for name, factory in (("standard", create_standard_app), ("minimal", create_minimal_app)):
        with TestClient(factory()) as client:
            users = time_endpoint(client, "/users", args.rounds)
            bench = time_endpoint(client, "/benchmark", args.benchmark_rounds)
        results[name] = (statistics.median(users), statistics.median(bench))

    print(f"\n  {'Variant':<12} {'/users p50':>14} {'/benchmark p50':>16}")
    print(f"  {'-'*12} {'-'*14} {'-'*16}")
    for name, (users_p50, bench_p50) in results.items():
        print(f"  {name:<12} {users_p50:>12.1f}ms {bench_p50:>14.1f}ms")


if __name__ == "__main__":
    try:
        main()
    except httpx.HTTPError as e:
        raise SystemExit(f"request failed: {e}")
