"""Memory footprint measurement for object graphs.

The measurer is a thin consumer of the explorer: the user gives a root
object, and the graph reachable from it is walked with the standard filters
while a visitor sums the shallow size of every accepted object.

Classes, modules, builtin singletons and the internals of enum members are
considered shared values and never contribute to the footprint of any single
object graph.
"""

import enum
import sys
from typing import Any, Callable, Dict, Optional

from .config import ExplorerConfig
from .core.adapter import ReferenceAdapter
from .core.chain import Chain
from .core.explorer import create_explorer
from .core.predicates import object_predicate
from .core.visitor import ObjectVisitor, Traversal


SizeOracle = Callable[[Any], int]


def shallow_size(obj: Any) -> int:
    """Return the shallow size of obj in bytes, excluding its referents."""
    return sys.getsizeof(obj)


class _DummyEnum(enum.Enum):
    CONSTANT = 0


# Mixin type -> one-member enum constant built on that mixin
_BARE_CONSTANTS: Dict[type, enum.Enum] = {object: _DummyEnum.CONSTANT}


def _bare_constant(member_type: type) -> enum.Enum:
    """Return a bare enum constant sharing member_type as its mixin.

    Mixins whose default value cannot be constructed without arguments fall
    back to the plain enum constant.
    """
    constant = _BARE_CONSTANTS.get(member_type)
    if constant is None:
        try:
            bare = enum.Enum('_BareConstant', [('CONSTANT', member_type())], type=member_type)
            constant = bare.CONSTANT
        except TypeError:
            constant = _DummyEnum.CONSTANT
        _BARE_CONSTANTS[member_type] = constant
    return constant


class MemoryMeasurerVisitor(ObjectVisitor[int]):
    """Sums the shallow size of every visited object.

    Enum members are process-wide singletons. For each one visited, the size
    of a bare enum constant with the same mixin type (int for IntEnum, str
    for StrEnum, none for a plain Enum) is subtracted, so only state beyond
    a plain constant is charged. Baselines are measured lazily with the same
    oracle, and a member is never charged less than zero.
    """

    def __init__(self, size_of: Optional[SizeOracle] = None):
        self.size_of = size_of if size_of is not None else shallow_size
        self.memory = 0
        self._enum_baselines: Dict[type, int] = {}

    def _cost_of_bare_enum_constant(self, member: enum.Enum) -> int:
        member_type = getattr(type(member), '_member_type_', object)
        baseline = self._enum_baselines.get(member_type)
        if baseline is None:
            baseline = self._enum_baselines[member_type] = self.size_of(_bare_constant(member_type))
        return baseline

    def visit(self, chain: Chain) -> Traversal:
        obj = chain.value
        size = self.size_of(obj)
        if isinstance(obj, enum.Enum):
            size = max(0, size - self._cost_of_bare_enum_constant(obj))
        self.memory += size
        return Traversal.EXPLORE

    def result(self) -> int:
        return self.memory


def measure_footprint_bytes(root: Any,
                            object_acceptor: Optional[Callable[[Any], bool]] = None,
                            *,
                            size_of: Optional[SizeOracle] = None,
                            adapter: Optional[ReferenceAdapter] = None,
                            config: Optional[ExplorerConfig] = None) -> int:
    """Measure the memory footprint, in bytes, of an object graph.

    The graph is the root object plus whatever can be reached from it,
    excluding shared values (classes, modules, builtin singletons, enum
    internals) and any object rejected by object_acceptor. Objects reachable
    along several paths are counted once.

    Args:
        root: Root object defining the graph to measure
        object_acceptor: Predicate returning True for objects to treat as part
            of the graph, False to stop the walk from entering them
        size_of: Shallow size oracle (default: sys.getsizeof)
        adapter: ReferenceAdapter (default: PythonObjectAdapter)
        config: Exploration options

    Returns:
        Footprint in bytes

    Raises:
        NullRootError: If root is None
        TypeError: If object_acceptor is not callable
        IntrospectionError: If an object's references cannot be enumerated

    Example:
        >>> measure_footprint_bytes({'a': [1, 2, 3]}) > 0
        True
    """
    additional_filter = None
    if object_acceptor is not None:
        additional_filter = object_predicate(object_acceptor)

    explorer = create_explorer(adapter, config)
    return explorer.explore(root, MemoryMeasurerVisitor(size_of), additional_filter)
