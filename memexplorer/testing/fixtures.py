"""Test fixtures for memexplorer consumers.

These fixtures make walks observable and footprints predictable, so tests
can assert exact visit sequences and byte counts instead of depending on
interpreter-specific object sizes.
"""

from typing import Any, Dict, List, Optional

from ..core.chain import Chain
from ..core.visitor import ObjectVisitor, Traversal


class Node:
    """Plain object with named references, for building test graphs.

    Example:
        shared = Node('S')
        root = Node('R', left=shared, right=shared)
    """

    def __init__(self, name: str, **refs: Any):
        self.name = name
        for field_name, value in refs.items():
            setattr(self, field_name, value)

    def __repr__(self) -> str:
        return f"Node({self.name!r})"


class SlottedNode:
    """Object storing its references in __slots__ rather than a __dict__."""

    __slots__ = ('name', 'next', 'payload')

    def __init__(self, name: str, next: Any = None, payload: Any = None):
        self.name = name
        self.next = next
        self.payload = payload

    def __repr__(self) -> str:
        return f"SlottedNode({self.name!r})"


class RecordingVisitor(ObjectVisitor[List[Chain]]):
    """Records every chain it is handed, in visit order.

    Args:
        skip: Objects (compared by identity) whose referents must not be
            explored
    """

    def __init__(self, skip: Optional[List[Any]] = None):
        self.chains: List[Chain] = []
        self._skip_ids = {id(obj) for obj in (skip or [])}

    def visit(self, chain: Chain) -> Traversal:
        self.chains.append(chain)
        if id(chain.value) in self._skip_ids:
            return Traversal.SKIP
        return Traversal.EXPLORE

    @property
    def objects(self) -> List[Any]:
        return [chain.value for chain in self.chains]

    def visits_of(self, obj: Any) -> int:
        """Number of times obj was visited (by identity)."""
        return sum(1 for chain in self.chains if chain.value is obj)

    def result(self) -> List[Chain]:
        return self.chains


class FixedSizeOracle:
    """Size oracle returning configured sizes per object identity.

    Objects without a configured size are charged ``default`` bytes. Every
    call is recorded in ``calls``.

    Example:
        oracle = FixedSizeOracle({root: 16, shared: 8})
        measure_footprint_bytes(root, size_of=oracle)
    """

    def __init__(self, sizes: Optional[Dict[Any, int]] = None, default: int = 0):
        self._sizes: Dict[int, int] = {}
        self._pinned: List[Any] = []
        self.default = default
        self.calls: List[Any] = []
        for obj, size in (sizes or {}).items():
            self.set(obj, size)

    def set(self, obj: Any, size: int) -> None:
        self._sizes[id(obj)] = size
        self._pinned.append(obj)

    def __call__(self, obj: Any) -> int:
        self.calls.append(obj)
        return self._sizes.get(id(obj), self.default)
