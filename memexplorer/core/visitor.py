"""Visitor contract for memexplorer.

A visitor is handed every object the explorer accepts, exactly once, and
folds them into a result. The same walk can therefore compute a footprint,
a count, a list of reachable objects or a spanning graph depending only on
the visitor passed in.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .chain import Chain, Hop


T = TypeVar('T')


class Traversal(Enum):
    """Decision returned by ObjectVisitor.visit()."""
    EXPLORE = "explore"     # Enumerate and walk this object's referents
    SKIP = "skip"           # Keep the visit, do not descend


class ObjectVisitor(ABC, Generic[T]):
    """Abstract base class for folds over an object graph walk.

    The explorer calls visit() once for each accepted object, in walk order,
    and result() once after the walk completes. Visitors accumulate state
    and are therefore single use: create a new instance for every walk.
    """

    @abstractmethod
    def visit(self, chain: Chain) -> Traversal:
        """Process the object at the end of chain.

        Args:
            chain: Path from the root to the accepted object

        Returns:
            Traversal.EXPLORE to walk the object's referents,
            Traversal.SKIP to leave them unexplored
        """
        pass

    @abstractmethod
    def result(self) -> T:
        """Return the value accumulated over the walk."""
        pass


class _DescendingVisitor(ObjectVisitor[T]):
    """Shared plumbing for stock visitors with an optional descend predicate.

    When ``descend`` rejects a chain the object is still recorded but its
    referents are left unexplored.
    """

    def __init__(self, descend: Optional[Callable[[Chain], bool]] = None):
        self.descend = descend

    @abstractmethod
    def record(self, chain: Chain) -> None:
        pass

    def visit(self, chain: Chain) -> Traversal:
        self.record(chain)
        if self.descend is not None and not self.descend(chain):
            return Traversal.SKIP
        return Traversal.EXPLORE


class CountingVisitor(_DescendingVisitor[int]):
    """Counts visited objects."""

    def __init__(self, descend: Optional[Callable[[Chain], bool]] = None):
        super().__init__(descend)
        self.count = 0

    def record(self, chain: Chain) -> None:
        self.count += 1

    def result(self) -> int:
        return self.count


class CollectingVisitor(_DescendingVisitor[List[Any]]):
    """Collects visited objects in visit order.

    A list is returned rather than a set because reachable objects are
    frequently unhashable; identity uniqueness is guaranteed by the walk.
    """

    def __init__(self, descend: Optional[Callable[[Chain], bool]] = None):
        super().__init__(descend)
        self.objects: List[Any] = []

    def record(self, chain: Chain) -> None:
        self.objects.append(chain.value)

    def result(self) -> List[Any]:
        return self.objects


@dataclass
class ObjectGraph:
    """Spanning graph of a walk, keyed by object identity.

    Only the edge through which each object was first reached is recorded;
    references to already visited objects do not appear as edges.

    Attributes:
        root_id: id() of the root object, or None for an empty walk
        nodes: id() -> object for every visited object
        edges: (parent id, hop, child id) in visit order
    """

    root_id: Optional[int] = None
    nodes: Dict[int, Any] = field(default_factory=dict)
    edges: List[Tuple[int, Hop, int]] = field(default_factory=list)

    def children_of(self, obj: Any) -> List[Any]:
        """Return the objects first reached from obj, in visit order."""
        parent_id = id(obj)
        return [self.nodes[child_id] for pid, _, child_id in self.edges if pid == parent_id]

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, obj: Any) -> bool:
        return self.nodes.get(id(obj)) is obj


class GraphVisitor(_DescendingVisitor[ObjectGraph]):
    """Builds an ObjectGraph of the walk."""

    def __init__(self, descend: Optional[Callable[[Chain], bool]] = None):
        super().__init__(descend)
        self.graph = ObjectGraph()

    def record(self, chain: Chain) -> None:
        child_id = id(chain.value)
        self.graph.nodes[child_id] = chain.value
        if chain.parent is None:
            self.graph.root_id = child_id
        else:
            self.graph.edges.append((id(chain.parent.value), chain.hop, child_id))

    def result(self) -> ObjectGraph:
        return self.graph


class CustomVisitor(ObjectVisitor[Any]):
    """Visitor built from plain functions.

    Allows custom folds without subclassing. visit_func may return a
    Traversal, or None to mean EXPLORE.
    """

    def __init__(self,
                 visit_func: Callable[[Chain], Optional[Traversal]],
                 result_func: Optional[Callable[[], Any]] = None):
        """Initialize with custom functions.

        Args:
            visit_func: Function(chain) -> Traversal or None
            result_func: Function() -> Any (default: returns None)
        """
        self.visit_func = visit_func
        self.result_func = result_func or (lambda: None)

    def visit(self, chain: Chain) -> Traversal:
        decision = self.visit_func(chain)
        return Traversal.EXPLORE if decision is None else decision

    def result(self) -> Any:
        return self.result_func()
