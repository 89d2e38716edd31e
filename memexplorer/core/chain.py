"""Chain abstraction for memexplorer.

A Chain records how the explorer reached the object it is currently looking
at: the object itself plus the sequence of hops (attribute names, indices,
mapping keys) leading back to the root. Chains are persistent linked lists,
so siblings share their parent node and nothing is copied as the walk grows.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, List, Optional


class HopKind(Enum):
    """How a value was reached from its parent object."""
    ROOT = "root"           # Start of the walk
    FIELD = "field"         # Instance attribute or slot
    INDEX = "index"         # Position in an ordered sequence
    KEY = "key"             # Key of a mapping entry
    VALUE = "value"         # Value of a mapping entry
    ELEMENT = "element"     # Member of an unordered collection
    NAMESPACE = "namespace"  # Instance attribute table (__dict__)
    CUSTOM = "custom"       # Produced by a caller-registered handler


@dataclass(frozen=True)
class Hop:
    """Immutable description of a single reference traversed by the explorer.

    The label depends on the kind: an attribute name for FIELD, an integer
    for INDEX, the mapping key for KEY and VALUE, None for ROOT and ELEMENT,
    and "__dict__" for NAMESPACE.
    """

    kind: HopKind
    label: Any = None

    @classmethod
    def root(cls) -> 'Hop':
        return cls(HopKind.ROOT)

    @classmethod
    def field(cls, name: str) -> 'Hop':
        return cls(HopKind.FIELD, name)

    @classmethod
    def index(cls, position: int) -> 'Hop':
        return cls(HopKind.INDEX, position)

    @classmethod
    def key(cls, key: Hashable) -> 'Hop':
        return cls(HopKind.KEY, key)

    @classmethod
    def value(cls, key: Hashable) -> 'Hop':
        return cls(HopKind.VALUE, key)

    @classmethod
    def element(cls) -> 'Hop':
        return cls(HopKind.ELEMENT)

    @classmethod
    def namespace(cls) -> 'Hop':
        return cls(HopKind.NAMESPACE, '__dict__')

    @classmethod
    def custom(cls, label: Any) -> 'Hop':
        return cls(HopKind.CUSTOM, label)

    def __str__(self) -> str:
        """Render the hop as it would appear in a path expression."""
        if self.kind is HopKind.ROOT:
            return "root"
        if self.kind is HopKind.FIELD:
            return f".{self.label}"
        if self.kind is HopKind.INDEX:
            return f"[{self.label}]"
        if self.kind is HopKind.KEY:
            return f".<key {self.label!r}>"
        if self.kind is HopKind.VALUE:
            return f"[{self.label!r}]"
        if self.kind is HopKind.ELEMENT:
            return ".<element>"
        if self.kind is HopKind.NAMESPACE:
            return ".__dict__"
        return f".<{self.label}>"


_ROOT_HOP = Hop.root()


class Chain:
    """Path record from the root object to the object being visited.

    A Chain is write-once: ``value``, ``parent`` and ``hop`` are fixed at
    construction and every derived chain is a new node pointing back at its
    parent. The value is held by reference and never copied.

    Use Chain.root() to start a walk and extend() to follow a reference.
    """

    __slots__ = ('_value', '_parent', '_hop', '_depth')

    def __init__(self, value: Any, parent: Optional['Chain'] = None, hop: Hop = _ROOT_HOP):
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_parent', parent)
        object.__setattr__(self, '_hop', hop)
        object.__setattr__(self, '_depth', 0 if parent is None else parent._depth + 1)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def root(cls, value: Any) -> 'Chain':
        """Create the initial chain for a walk starting at value."""
        return cls(value)

    def extend(self, hop: Hop, value: Any) -> 'Chain':
        """Create a child chain reaching value from this chain's value via hop."""
        return Chain(value, self, hop)

    @property
    def value(self) -> Any:
        """The object at the end of this chain."""
        return self._value

    @property
    def parent(self) -> Optional['Chain']:
        """The chain this one was extended from, or None for the root."""
        return self._parent

    @property
    def hop(self) -> Hop:
        """How value was reached from parent.value."""
        return self._hop

    @property
    def depth(self) -> int:
        """Number of hops from the root (root = 0)."""
        return self._depth

    def is_root(self) -> bool:
        return self._parent is None

    def _nodes(self) -> List['Chain']:
        nodes = []
        current: Optional[Chain] = self
        while current is not None:
            nodes.append(current)
            current = current._parent
        nodes.reverse()
        return nodes

    def hops(self) -> List[Hop]:
        """Return the hops from the root to this chain, root hop first."""
        return [node._hop for node in self._nodes()]

    def objects(self) -> List[Any]:
        """Return the objects along the path, root first."""
        return [node._value for node in self._nodes()]

    def path_string(self) -> str:
        """Render the path as an expression, e.g. ``root.items[2]['key']``."""
        return "".join(str(hop) for hop in self.hops())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path_string()} -> {type(self._value).__name__})"


def chain_to_object(chain: Chain) -> Any:
    """Project a chain onto the object it ends at, discarding the path."""
    return chain.value
