"""Core components of memexplorer: chains, filters, visitors, adapters, explorers."""

from .chain import Chain, Hop, HopKind, chain_to_object
from .predicates import (
    ACCEPT_ALL,
    AtMostOncePredicate,
    ChainPredicate,
    and_,
    as_predicate,
    not_,
    not_shared_state,
    object_predicate,
    or_,
)
from .visitor import (
    CollectingVisitor,
    CountingVisitor,
    CustomVisitor,
    GraphVisitor,
    ObjectGraph,
    ObjectVisitor,
    Traversal,
)
from .adapter import PythonObjectAdapter, ReferenceAdapter
from .explorer import (
    BreadthFirstExplorer,
    DepthFirstExplorer,
    ObjectExplorer,
    create_explorer,
)

__all__ = [
    'Chain',
    'Hop',
    'HopKind',
    'chain_to_object',
    'ACCEPT_ALL',
    'AtMostOncePredicate',
    'ChainPredicate',
    'and_',
    'as_predicate',
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
]
