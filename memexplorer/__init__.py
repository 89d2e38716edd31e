"""memexplorer - Object graph exploration and memory footprint measurement.

memexplorer walks the objects reachable from a root reference, visiting each
distinct object once, and folds them into a result through a pluggable
visitor. Footprint measurement is one such fold:

    from memexplorer import measure_footprint_bytes
    size = measure_footprint_bytes(my_object)

Custom folds use the explorer directly:

    from memexplorer import explore, CountingVisitor
    count = explore(my_object, CountingVisitor())
"""

__version__ = "0.1.0"

# Core components
from .core.chain import Chain, Hop, HopKind, chain_to_object
from .core.predicates import (
    ACCEPT_ALL,
    AtMostOncePredicate,
    ChainPredicate,
    and_,
    not_,
    not_shared_state,
    object_predicate,
    or_,
)
from .core.visitor import (
    CollectingVisitor,
    CountingVisitor,
    CustomVisitor,
    GraphVisitor,
    ObjectGraph,
    ObjectVisitor,
    Traversal,
)
from .core.adapter import PythonObjectAdapter, ReferenceAdapter
from .core.explorer import (
    BreadthFirstExplorer,
    DepthFirstExplorer,
    ObjectExplorer,
    create_explorer,
)

# Configuration and errors
from .config import ExplorationStrategy, ExplorerConfig
from .errors import ConfigurationError, ExplorerError, IntrospectionError, NullRootError

# High-level API
from .api import collect_reachable, count_reachable, explore, reachable_graph
from .measurer import MemoryMeasurerVisitor, measure_footprint_bytes, shallow_size

__all__ = [
    '__version__',
    # Core
    'Chain',
    'Hop',
    'HopKind',
    'chain_to_object',
    'ACCEPT_ALL',
    'AtMostOncePredicate',
    'ChainPredicate',
    'and_',
    'not_',
    'not_shared_state',
    'object_predicate',
    'or_',
    'CollectingVisitor',
    'CountingVisitor',
    'CustomVisitor',
    'GraphVisitor',
    'ObjectGraph',
    'ObjectVisitor',
    'Traversal',
    'PythonObjectAdapter',
    'ReferenceAdapter',
    'BreadthFirstExplorer',
    'DepthFirstExplorer',
    'ObjectExplorer',
    'create_explorer',
    # Config
    'ExplorationStrategy',
    'ExplorerConfig',
    # Errors
    'ConfigurationError',
    'ExplorerError',
    'IntrospectionError',
    'NullRootError',
    # API
    'explore',
    'count_reachable',
    'collect_reachable',
    'reachable_graph',
    'MemoryMeasurerVisitor',
    'measure_footprint_bytes',
    'shallow_size',
]
