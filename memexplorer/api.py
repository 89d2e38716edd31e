"""High-level API for memexplorer.

This module provides simple, functional interfaces for common walks over an
object graph. These functions wrap the object-oriented explorer API for ease
of use in simple cases.
"""

from typing import Any, Callable, List, Optional, TypeVar, Union

from .config import ExplorationStrategy, ExplorerConfig
from .core.adapter import ReferenceAdapter
from .core.chain import Chain
from .core.explorer import create_explorer
from .core.visitor import (
    CollectingVisitor,
    CountingVisitor,
    GraphVisitor,
    ObjectGraph,
    ObjectVisitor,
)


T = TypeVar('T')


def _config(config: Optional[ExplorerConfig],
            strategy: Optional[Union[ExplorationStrategy, str]]) -> Optional[ExplorerConfig]:
    if strategy is None:
        return config
    if config is None:
        return ExplorerConfig(strategy=strategy)
    return ExplorerConfig(
        strategy=strategy,
        exclude_shared_state=config.exclude_shared_state,
        max_depth=config.max_depth,
    )


def explore(root: Any,
            visitor: ObjectVisitor[T],
            additional_filter: Optional[Callable[[Chain], bool]] = None,
            *,
            adapter: Optional[ReferenceAdapter] = None,
            config: Optional[ExplorerConfig] = None,
            strategy: Optional[Union[ExplorationStrategy, str]] = None) -> T:
    """Walk the object graph reachable from root with visitor.

    This is the primary entry point. The filter applied to every chain is
    at-most-once AND not-shared-state (unless disabled in config) AND
    additional_filter.

    Args:
        root: Object the walk starts from
        visitor: Fresh ObjectVisitor for this walk
        additional_filter: Extra Chain predicate
        adapter: ReferenceAdapter (default: PythonObjectAdapter)
        config: Exploration options
        strategy: Shortcut overriding config.strategy ('dfs' or 'bfs')

    Returns:
        visitor.result()

    Example:
        >>> explore([1, [2, 3]], CountingVisitor())
        5
    """
    explorer = create_explorer(adapter, _config(config, strategy))
    return explorer.explore(root, visitor, additional_filter)


def count_reachable(root: Any,
                    additional_filter: Optional[Callable[[Chain], bool]] = None,
                    **kwargs) -> int:
    """Count objects reachable from root, root included.

    Args:
        root: Object the walk starts from
        additional_filter: Extra Chain predicate
        **kwargs: adapter, config or strategy (see explore)
    """
    return explore(root, CountingVisitor(), additional_filter, **kwargs)


def collect_reachable(root: Any,
                      additional_filter: Optional[Callable[[Chain], bool]] = None,
                      **kwargs) -> List[Any]:
    """Return the objects reachable from root in visit order."""
    return explore(root, CollectingVisitor(), additional_filter, **kwargs)


def reachable_graph(root: Any,
                    additional_filter: Optional[Callable[[Chain], bool]] = None,
                    **kwargs) -> ObjectGraph:
    """Return the spanning ObjectGraph of the walk from root."""
    return explore(root, GraphVisitor(), additional_filter, **kwargs)
