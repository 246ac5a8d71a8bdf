"""Block-list arena for search tree nodes.

Nodes are never freed one at a time. The arena hands out objects stored in
fixed-capacity blocks and drops every block at once on ``clear()``.
Opening a new block never moves objects held by earlier blocks.
"""

import logging
from collections import deque
from typing import Callable, Deque, Generic, Iterator, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BLOCK_SIZE = 4096


class Arena(Generic[T]):
    """Single-type arena allocator.

    Args:
        factory: Callable building a ``T``; ``alloc`` forwards its arguments here
        block_size: Capacity of each block
    """

    def __init__(self, factory: Callable[..., T], block_size: int = DEFAULT_BLOCK_SIZE):
        if block_size <= 0:
            raise ValueError("Arena block size must be positive")
        self.factory = factory
        self.block_size = block_size
        self._blocks: Deque[List[T]] = deque()
        self._size = 0

    def alloc(self, *args, **kwargs) -> T:
        """Construct a new object in the front block and return it."""
        if not self._blocks or len(self._blocks[0]) == self.block_size:
            self._blocks.appendleft([])
            logger.debug(f"Arena opened block {len(self._blocks)} (size={self._size})")
        obj = self.factory(*args, **kwargs)
        self._blocks[0].append(obj)
        self._size += 1
        return obj

    def clear(self) -> None:
        """Release every block at once."""
        self._blocks.clear()
        self._size = 0

    @property
    def num_blocks(self) -> int:
        return len(self._blocks)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        # Oldest block first, in allocation order.
        for block in reversed(self._blocks):
            yield from block

    def __repr__(self) -> str:
        return f"Arena(size={self._size}, blocks={self.num_blocks}, block_size={self.block_size})"
