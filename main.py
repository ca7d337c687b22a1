"""
UI-Thread Responsiveness Benchmarks - Main entry point.

Lists the benchmark suite and how to run it.
"""


def main():
    """Main entry point for the benchmarking suite."""
    print("UI-Thread Responsiveness Benchmarks")
    print("=" * 50)
    print("\nAvailable benchmarks:")
    print("  - CPU: Sieve of Eratosthenes up to 1,000,000 on the calling thread")
    print("  - Scroll: FPS, jank (>25 ms frames) and battery drain")
    print("  - Memory: RSS growth while a synthetic list is held")
    print("  - Startup: Time to interactive")
    print("\nRun the suite:")
    print("  python -m instrumentation.benchmarks.run --quick")
    print("\nList experiments:")
    print("  python -m instrumentation.benchmarks.run --list")


if __name__ == "__main__":
    main()
