"""Fannkuch-redux benchmark: pancake flips over every permutation of 0..n-1.

Permutations are visited in the fixed rotation order of the classic
algorithm. The checksum adds the flip count of even-numbered
permutations and subtracts that of odd-numbered ones.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FannkuchConfig:
    n: int = 10

    def validate(self) -> None:
        if self.n <= 0:
            raise ValueError("n must be > 0")


REFERENCE = FannkuchConfig()


def count_flips(perm: list[int]) -> int:
    """Reverse the first perm[0] + 1 items until perm[0] == 0 (mutating)."""
    flips = 0
    k = perm[0]
    while k != 0:
        perm[: k + 1] = perm[k::-1]
        flips += 1
        k = perm[0]
    return flips


def fannkuch(n: int) -> tuple[int, int]:
    """Return (checksum, max flips) over all permutations of 0..n-1."""
    if n <= 0:
        raise ValueError("n must be > 0")
    perm1 = list(range(n))
    count = [0] * n
    max_flips = 0
    checksum = 0
    perm_count = 0
    r = n

    while True:
        while r != 1:
            count[r - 1] = r
            r -= 1

        flips = count_flips(perm1[:])
        max_flips = max(max_flips, flips)
        checksum += flips if perm_count % 2 == 0 else -flips

        while True:
            if r == n:
                return checksum, max_flips
            perm0 = perm1[0]
            perm1[:r] = perm1[1 : r + 1]
            perm1[r] = perm0
            count[r] -= 1
            if count[r] > 0:
                break
            r += 1

        perm_count += 1


def main() -> int:
    REFERENCE.validate()
    n = REFERENCE.n
    checksum, max_flips = fannkuch(n)
    print(checksum)
    print(f"Pfannkuchen({n}) = {max_flips}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
