"""Benchmark programs, each an argument-free entry point."""

from __future__ import annotations

from importlib import import_module
from typing import Callable


PROGRAMS: dict[str, str] = {
    "nbody": "compute_bench.programs.nbody",
    "fibonacci": "compute_bench.programs.fibonacci",
    "binary_trees": "compute_bench.programs.binary_trees",
    "bounds_check": "compute_bench.programs.bounds_check",
    "spectral_norm": "compute_bench.programs.spectral_norm",
    "mandelbrot": "compute_bench.programs.mandelbrot",
    "fannkuch": "compute_bench.programs.fannkuch",
}


def program_names() -> list[str]:
    return list(PROGRAMS.keys())


def get_program(name: str) -> Callable[[], int]:
    """Return the ``main`` of a program, importing its module on demand."""
    if name not in PROGRAMS:
        raise ValueError(f"unknown program: {name}")
    return import_module(PROGRAMS[name]).main
