"""System information and performance measurements."""

from __future__ import annotations

import functools
import math
import os
import platform
import sys
import time

import psutil

NUM_TESTS = 1_000_000
OPERATIONS_PER_ITERATION = 4  # sin, add, multiply, divide
NUM_REPEATS = 5

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def num_cores() -> int:
    """Number of logical cores, falling back to 1."""
    return os.cpu_count() or 1


def cpu_stats() -> tuple[int, int]:
    """Return (logical_cores, frequency_mhz); frequency is 0 when unknown."""
    logical_cores = num_cores()
    freq = psutil.cpu_freq()
    mhz = int(freq.current) if freq is not None and freq.current else 0
    return logical_cores, mhz


def _flops_per_cycle_per_core() -> int:
    """Double-precision operations per cycle per core for this architecture."""
    if platform.machine().lower() in ("x86_64", "amd64"):
        return 4  # 128-bit SSE2 vectors
    return 1


def estimate_peak_gflops(num_provers: int) -> float:
    """Estimate peak GFLOP/s from the prover count and clock speed."""
    _cores, mhz = cpu_stats()
    return (num_provers * mhz * _flops_per_cycle_per_core()) / 1000.0


@functools.cache
def measure_gflops() -> float:
    """Measure GFLOP/s by running a math loop; the result is cached."""
    cores = os.cpu_count()
    if cores is None:
        print(
            "Warning: Unable to determine the number of logical cores. Defaulting to 1.",
            file=sys.stderr,
        )
        cores = 1

    total = 0.0
    for _ in range(NUM_REPEATS):
        start = time.perf_counter()
        flops = 0
        for _ in range(cores):
            x = 1.0
            for _ in range(NUM_TESTS):
                x = (math.sin(x) + 1.0) * 0.5 / 1.1
            flops += NUM_TESTS * OPERATIONS_PER_ITERATION
        total += flops / (time.perf_counter() - start)
    return (total / NUM_REPEATS) / 1e9


def bytes_to_mb_i32(num_bytes: int) -> int:
    """Convert bytes to thousandths of a MiB, rounded half away from zero."""
    value = num_bytes * 1000.0 / 1_048_576.0
    rounded = math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)
    return max(_I32_MIN, min(_I32_MAX, rounded))


def get_memory_info() -> tuple[int, int]:
    """Return (process memory, total memory), both via bytes_to_mb_i32."""
    process_bytes = psutil.Process(os.getpid()).memory_info().rss
    total_bytes = psutil.virtual_memory().total
    return bytes_to_mb_i32(process_bytes), bytes_to_mb_i32(total_bytes)


def total_memory_gb() -> float:
    """Total machine memory in GB (10^9 bytes)."""
    return psutil.virtual_memory().total / 1000.0 / 1000.0 / 1000.0


def process_memory_gb() -> float:
    """Memory used by the current process in GB (10^9 bytes)."""
    return psutil.Process(os.getpid()).memory_info().rss / 1000.0 / 1000.0 / 1000.0