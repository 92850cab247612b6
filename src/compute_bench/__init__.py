"""Fixed-workload compute micro-benchmarks."""

__version__ = "0.1.0"
