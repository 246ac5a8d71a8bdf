"""Whole-tree walks over MCTS nodes."""

from typing import Dict, Generic, Iterator, List

import numpy as np

from ..core.errors import ContractViolation
from ..games.base import G
from .node import Node


class MCTSTree(Generic[G]):
    """View of the subtree rooted at ``root``."""

    def __init__(self, root: Node[G]):
        self.root = root

    def iter_nodes(self) -> Iterator[Node[G]]:
        """Depth-first iteration over every node."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in reversed(node.children) if child is not None)

    def count_nodes(self) -> int:
        """Count total nodes."""
        return sum(1 for _ in self.iter_nodes())

    def count_leaves(self) -> int:
        """Count terminal nodes."""
        return sum(1 for node in self.iter_nodes() if node.is_leaf())

    def max_depth(self) -> int:
        """Length of the longest path from the root."""
        def visit(node: Node[G]) -> int:
            depths = [visit(child) for child in node.children if child is not None]
            return 1 + max(depths) if depths else 0
        return visit(self.root)

    def find_violations(self) -> List[str]:
        """List statistics invariants broken anywhere in the tree."""
        problems = []
        for node in self.iter_nodes():
            explored = np.array([child is not None for child in node.children])
            if node.is_leaf():
                if explored.any() or node.tries.any() or node.wins.any():
                    problems.append(f"{node!r}: terminal node has move statistics")
                if node.tot_tries not in (0, 1):
                    problems.append(f"{node!r}: terminal node tot_tries={node.tot_tries}")
                continue
            if node.tot_tries != int(node.tries.sum()):
                problems.append(f"{node!r}: tot_tries != sum(tries)")
            if not np.array_equal(explored, node.tries > 0):
                problems.append(f"{node!r}: explored moves do not match tries > 0")
            if (np.abs(node.wins) > node.tries).any():
                problems.append(f"{node!r}: |wins| exceeds tries")
            if (explored & ~node.valid_mask).any():
                problems.append(f"{node!r}: invalid move explored")
        return problems

    def check_invariants(self) -> None:
        """Raise ContractViolation if any statistics invariant is broken."""
        problems = self.find_violations()
        if problems:
            raise ContractViolation("; ".join(problems[:10]))

    def get_statistics(self) -> Dict[str, int]:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "terminal_nodes": self.count_leaves(),
            "max_depth": self.max_depth(),
            "root_visits": self.root.tot_tries,
        }
