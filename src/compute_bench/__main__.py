"""Package entrypoint: lists the benchmark programs."""

from __future__ import annotations

from . import __version__
from .programs import program_names


def main() -> int:
    print(f"compute_bench v{__version__}")
    print("programs:", ", ".join(program_names()))
    print("run one with: python -m compute_bench.programs.<name>")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
