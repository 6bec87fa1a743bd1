"""Prover node helpers: task cache, system measurements, release checks, dashboard text and a Fibonacci program."""

__version__ = "0.9.7"