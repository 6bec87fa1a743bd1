# nexusprover

Building blocks for a prover node. It has a bounded cache of recently seen
task IDs, machine measurements, a background release checker, the text
shown on the node's dashboard, and the Fibonacci guest program that the node
proves.

## Installation

    pip install nexusprover

To run the tests:

    pip install "nexusprover[test]"
    pytest

## The Fibonacci program

The `nexusprover-fib` command reads up to three lines from standard input.
The first line is the number of steps `n` and is required. The next two lines
are the starting values. Each starting value defaults to 1 when its line is
missing or cannot be read as an unsigned 32-bit number. The command prints the
resulting value, and the additions wrap at 32 bits. When the first line is
missing or malformed, the command prints the error to standard error and exits
with status 1.

    printf '9\n1\n1\n' | nexusprover-fib
    89

The same calculation is available from Python:

    from nexusprover.fib import fibonacci, parse_inputs

    fibonacci(9, 1, 1)             # 89
    parse_inputs(["9"])            # (9, 1, 1)

`parse_inputs` raises `ValueError` when the first line is missing or is not
a valid unsigned 32-bit number.

## Tasks and the task cache

`nexusprover.task.Task` is a frozen dataclass. It holds a `task_id`, a
`program_id` and the task's `public_inputs` as bytes.

`nexusprover.task_cache.TaskCache(capacity, expiration)` is a thread-safe
record of recently seen task IDs. `expiration` is in seconds. Entries older
than the expiration are dropped. When the cache is full, inserting a new ID
evicts the oldest entry. Inserting an ID that is already cached does nothing.

    from nexusprover.task_cache import TaskCache

    cache = TaskCache(capacity=1000, expiration=300.0)
    cache.insert("task-1")
    cache.contains("task-1")   # True

## System information

`nexusprover.system` provides the following functions:

- `num_cores()` returns the number of logical cores, or 1 when it cannot be
  determined.
- `cpu_stats()` returns `(logical_cores, frequency_mhz)`. The frequency is 0
  when it is unknown.
- `estimate_peak_gflops(num_provers)` returns a theoretical peak from the
  clock speed.
- `measure_gflops()` runs a floating-point loop once per core. It is measured
  on the first call and cached after that.
- `get_memory_info()` returns process and total memory. Both values are
  converted with `bytes_to_mb_i32`, which gives thousandths of a MiB, rounded
  and clamped to the signed 32-bit range.
- `total_memory_gb()` and `process_memory_gb()` return sizes in units of
  10^9 bytes.

## Version checking

`nexusprover.version_checker` compares the running version with the latest
published release.

`VersionInfo.is_newer_version()` accepts versions with or without a leading
`v`. Anything that is not a valid semantic version counts as "no update".

`version_checker_task(checker, events, shutdown)` is a coroutine that runs in
the background:

- `events` is an `asyncio.Queue` and `shutdown` is an `asyncio.Event`.
- It checks once at start and puts a `VersionEvent` on the queue. Each event
  carries a message, an `EventType` and a `LogLevel`.
- After that it checks again every day until `shutdown` is set. A newly
  available update is reported only once. Failures are reported as error
  events.
- `version_checker_task_with_interval` takes the interval in seconds.
- `start_version_checker_task` runs the same loop with the real HTTP-based
  `VersionChecker`.

Any subclass of `VersionCheckable` can stand in for `VersionChecker`.

## Dashboard text

`nexusprover.ui` produces the strings the dashboard shows:

    from nexusprover.ui import (
        clean_http_error_message, extract_version_from_message,
        format_compact_timestamp, format_uptime,
    )

    extract_version_from_message("🚀 New version v0.9.1 available!")  # "v0.9.1"
    format_compact_timestamp("2024-01-01 12:00:00")                   # "01-01 12:00:00"
    clean_http_error_message("<html>502 Bad Gateway</html>")          # "❌ HTTP 502 Bad Gateway"
    format_uptime(90061)                                              # "UPTIME: 1d 1h 1m 1s"

`title_text()` gives the title bar and `footer_text()` gives the footer.
`splash_lines()` gives the splash logo and `login_text()` gives the login
prompt.

## What this package does not do

This package is not a complete prover node. It does not include the
following:

- a client for the orchestrator;
- task fetching, proving or proof submission workers;
- user or node registration, or a configuration file;
- a terminal user interface that draws screens or reads keys.

It supplies only the pieces described above.