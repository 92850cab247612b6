"""Binary trees benchmark: allocate, walk and release perfect binary trees.

A parent owns its two children exclusively. ``free_tree`` detaches them
in post-order so every node is released exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class TreeNode:
    left: "TreeNode | None" = None
    right: "TreeNode | None" = None


@dataclass(frozen=True, slots=True)
class BinaryTreesConfig:
    min_depth: int = 4
    max_depth: int = 14

    @property
    def stretch_depth(self) -> int:
        return self.max_depth + 1

    def validate(self) -> None:
        if self.min_depth < 0:
            raise ValueError("min_depth must be >= 0")
        if self.min_depth > self.max_depth:
            raise ValueError("min_depth must be <= max_depth")


REFERENCE = BinaryTreesConfig()


def make_tree(depth: int) -> TreeNode:
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return TreeNode()
    return TreeNode(make_tree(depth - 1), make_tree(depth - 1))


def check_tree(node: TreeNode) -> int:
    if node.left is None:
        return 1
    return 1 + check_tree(node.left) + check_tree(node.right)


def free_tree(node: TreeNode) -> int:
    """Release ``node`` and its subtree; return the number of nodes released."""
    released = 1
    if node.left is not None:
        released += free_tree(node.left)
        released += free_tree(node.right)
    node.left = None
    node.right = None
    return released


def iterations_for(depth: int, config: BinaryTreesConfig = REFERENCE) -> int:
    return 1 << (config.max_depth - depth + config.min_depth)


def depth_bands(config: BinaryTreesConfig = REFERENCE) -> Iterator[tuple[int, int, int]]:
    """Yield (iterations, depth, check) for depth = min_depth, min_depth + 2, ..."""
    for depth in range(config.min_depth, config.max_depth + 1, 2):
        iterations = iterations_for(depth, config)
        check = 0
        for _ in range(iterations):
            tree = make_tree(depth)
            check += check_tree(tree)
            free_tree(tree)
        yield iterations, depth, check


def report(config: BinaryTreesConfig = REFERENCE) -> list[str]:
    config.validate()
    lines = []

    stretch = make_tree(config.stretch_depth)
    lines.append(f"stretch tree check: {check_tree(stretch)}")
    free_tree(stretch)

    long_lived = make_tree(config.max_depth)

    for iterations, depth, check in depth_bands(config):
        lines.append(f"{iterations} trees of depth {depth} check: {check}")

    lines.append(f"long lived tree check: {check_tree(long_lived)}")
    free_tree(long_lived)
    return lines


def main() -> int:
    for line in report(REFERENCE):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
